"""회사 레포지토리: 회사 CRUD 및 검색 쿼리.

Company Repository: CRUD and search queries for companies.
Companies are keyed by ``handle``; update fields use camelCase names
that map onto snake_case columns.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import fetch_rows
from app.query import COMPANY_FILTERS
from app.repositories.base import BaseRepository

_COLUMNS: str = "handle, name, description, num_employees, logo_url"

# 불규칙 컬럼명 매핑: Logical field name to column name
COMPANY_COLUMN_OVERRIDES: dict[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyRepository(BaseRepository):
    """companies 테이블 쿼리를 담당하는 레포지토리.

    Repository handling queries for the companies table.
    """

    def __init__(self) -> None:
        super().__init__(
            table="companies",
            key_column="handle",
            returning=_COLUMNS,
            select_sql=f"SELECT {_COLUMNS} FROM companies",
            order_by="name",
            filters=COMPANY_FILTERS,
            column_overrides=COMPANY_COLUMN_OVERRIDES,
        )

    async def create(self, db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
        """새 회사를 생성합니다.

        Insert a company and return the stored row.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: handle, name, description, num_employees, logo_url

        Returns:
            dict[str, Any]: 생성된 행 (The created row)
        """
        rows = await fetch_rows(
            db,
            f"INSERT INTO companies ({_COLUMNS}) "
            f"VALUES ($1, $2, $3, $4, $5) "
            f"RETURNING {_COLUMNS}",
            [
                data["handle"],
                data["name"],
                data.get("description"),
                data.get("num_employees"),
                data.get("logo_url"),
            ],
        )
        return rows[0]

    async def get_jobs(self, db: AsyncSession, handle: str) -> list[dict[str, Any]]:
        """회사의 채용 공고 목록: Jobs posted by a company, by id."""
        return await fetch_rows(
            db,
            "SELECT id, title, salary, equity FROM jobs WHERE company_handle = $1 ORDER BY id",
            [handle],
        )


# 싱글턴 인스턴스: Singleton instance
company_repository: CompanyRepository = CompanyRepository()
