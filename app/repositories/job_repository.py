"""채용 공고 레포지토리: 공고 CRUD 및 검색 쿼리.

Job Repository: CRUD and search queries for jobs.
Reads join the owning company to include its display name.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import fetch_rows
from app.query import JOB_FILTERS
from app.repositories.base import BaseRepository

_RETURNING: str = "id, title, salary, equity, company_handle"

_SELECT: str = (
    "SELECT j.id, j.title, j.salary, j.equity, j.company_handle, c.name AS company_name "
    "FROM jobs AS j "
    "LEFT JOIN companies AS c ON j.company_handle = c.handle"
)


class JobRepository(BaseRepository):
    """jobs 테이블 쿼리를 담당하는 레포지토리.

    Repository handling queries for the jobs table.
    Job fields map to columns one-to-one, so updates use no overrides.
    """

    def __init__(self) -> None:
        super().__init__(
            table="jobs",
            key_column="id",
            key_ref="j.id",
            returning=_RETURNING,
            select_sql=_SELECT,
            order_by="j.id",
            filters=JOB_FILTERS,
        )

    async def create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        """새 채용 공고를 생성합니다: Insert a job and return the stored row."""
        rows = await fetch_rows(
            db,
            "INSERT INTO jobs (title, salary, equity, company_handle) "
            "VALUES ($1, $2, $3, $4) "
            f"RETURNING {_RETURNING}",
            [data["title"], data.get("salary"), data.get("equity"), data["company_handle"]],
        )
        return rows[0]


# 싱글턴 인스턴스: Singleton instance
job_repository: JobRepository = JobRepository()
