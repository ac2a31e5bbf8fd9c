"""회사 관련 Pydantic 요청/응답 스키마 정의.

Company Pydantic request/response schema definitions.
JSON uses camelCase (``numEmployees``, ``logoUrl``); Python attributes and
database columns use snake_case.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompanyCreate(BaseModel):
    """회사 생성 요청 스키마.

    Company creation request schema.

    Attributes:
        handle: 회사 고유 식별자 (Unique URL-safe key)
        name: 회사 이름 (Company name)
        description: 설명 (Description, optional)
        num_employees: 직원 수 (Employee count, optional)
        logo_url: 로고 URL (Logo URL, optional)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None


class CompanyUpdate(BaseModel):
    """회사 수정 요청 스키마 (부분 업데이트).

    Company update request schema (partial update). ``handle`` cannot change.
    Dump with ``exclude_unset=True, by_alias=True`` to get the logical field
    names the column override table maps; dumped keys follow field order.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    num_employees: int | None = Field(default=None, ge=0)
    description: str | None = None
    logo_url: str | None = None

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, value: str | None) -> str:
        # name 컬럼은 NOT NULL: 생략은 허용, null 지정은 거부
        if value is None:
            raise ValueError("name may not be null")
        return value


class CompanyResponse(BaseModel):
    """회사 응답 스키마: Company response schema."""

    model_config = _CAMEL

    handle: str
    name: str
    description: str | None
    num_employees: int | None
    logo_url: str | None


class CompanyJobResponse(BaseModel):
    """회사 상세에 포함되는 공고 요약: Job summary nested in company detail."""

    model_config = _CAMEL

    id: int
    title: str
    salary: int | None
    equity: Decimal | None


class CompanyDetailResponse(CompanyResponse):
    """회사 상세 응답: 채용 공고 포함.

    Company detail response including the company's jobs.
    """

    jobs: list[CompanyJobResponse] = []
