"""채용 공고 Pydantic 요청/응답 스키마 정의.

Job Pydantic request/response schema definitions.
``equity`` is a fraction in [0, 1]; it is serialized as a decimal string.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobCreate(BaseModel):
    """채용 공고 생성 요청 스키마.

    Job creation request schema.

    Attributes:
        title: 공고 제목 (Job title)
        salary: 연봉 (Salary, optional)
        equity: 지분 비율 0~1 (Equity fraction, defaults to 0, never null)
        company_handle: 소속 회사 handle (Owning company's handle)
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    # hasEquity=false 필터(equity >= 0)가 모든 공고와 일치하도록 NULL 저장 금지
    equity: Decimal = Field(default=Decimal("0"), ge=0, le=1)
    company_handle: str = Field(min_length=1)


class JobUpdate(BaseModel):
    """채용 공고 수정 요청 스키마 (부분 업데이트).

    Job update request schema. ``id`` and ``company_handle`` cannot change.
    ``title`` and ``equity`` may be omitted but not set to null.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)

    @field_validator("title", "equity")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return value


class JobResponse(BaseModel):
    """채용 공고 응답 스키마.

    Job response schema. ``company_name`` is present on reads, which join
    the owning company, and null on create/update.
    """

    id: int
    title: str
    salary: int | None
    equity: Decimal | None
    company_handle: str
    company_name: str | None = None
