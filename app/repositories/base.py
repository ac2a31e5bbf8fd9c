"""기본 레포지토리: 모든 레포지토리의 부모 클래스.

Base Repository: Parent class for the entity repositories.
Holds the fixed SQL templates shared by every entity (select all, select by
key, filtered search, partial update by key, delete by key) and splices the
query fragments from :mod:`app.query` into them.

Usage:
    class CompanyRepository(BaseRepository):
        def __init__(self) -> None:
            super().__init__(table="companies", key_column="handle", ...)
"""

from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import fetch_rows
from app.query import FilterFamily, QueryFragment, build_filter, build_update


class BaseRepository:
    """위치 파라미터 SQL 기반 레포지토리.

    Repository built on positional SQL templates.
    Builder errors (:class:`app.query.QueryBuildError`) are raised before any
    statement is sent; database errors propagate unchanged.

    Attributes:
        table: 테이블 이름 (Table name)
        key_column: 기본 키 컬럼 (Primary key column)
        returning: UPDATE 결과 컬럼 목록 (Column list returned by UPDATE)
        select_sql: 조회 기본 SELECT 문, WHERE 없음 (Base SELECT without WHERE)
        key_ref: select_sql 안에서 키를 가리키는 식 (Key expression inside select_sql)
        order_by: 목록 정렬 식 (ORDER BY expression for lists)
        filters: 허용 필터 정의 (Filter family for searches)
        column_overrides: 필드명 → 컬럼명 예외 매핑 (Field to column overrides for updates)
    """

    def __init__(
        self,
        *,
        table: str,
        key_column: str,
        returning: str,
        select_sql: str,
        order_by: str,
        filters: FilterFamily,
        key_ref: str | None = None,
        column_overrides: Mapping[str, str] | None = None,
    ) -> None:
        self.table: str = table
        self.key_column: str = key_column
        self.returning: str = returning
        self.select_sql: str = select_sql
        self.key_ref: str = key_ref or key_column
        self.order_by: str = order_by
        self.filters: FilterFamily = filters
        self.column_overrides: Mapping[str, str] = column_overrides or {}

    async def get_all(self, db: AsyncSession) -> list[dict[str, Any]]:
        """모든 행을 정렬 순서대로 조회합니다: All rows in list order."""
        return await fetch_rows(db, f"{self.select_sql} ORDER BY {self.order_by}")

    async def get_by_key(self, db: AsyncSession, key: Any) -> dict[str, Any] | None:
        """키로 단일 행을 조회합니다.

        Retrieve a single row by its key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            key: 기본 키 값 (Primary key value)

        Returns:
            dict[str, Any] | None: 조회된 행 또는 None (Found row or None)
        """
        rows = await fetch_rows(db, f"{self.select_sql} WHERE {self.key_ref} = $1", [key])
        return rows[0] if rows else None

    async def search(self, db: AsyncSession, criteria: Mapping[str, Any]) -> list[dict[str, Any]]:
        """원시 필터 값으로 검색합니다.

        Coerce raw criteria, build the predicate fragment and run the search.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            criteria: 쿼리 문자열 필터 값 (Raw text-valued criteria)

        Returns:
            list[dict[str, Any]]: 일치하는 행, 없으면 빈 목록 (Matching rows, possibly empty)

        Raises:
            QueryBuildError: 필터가 유효하지 않을 때 (Invalid criteria)
        """
        fragment: QueryFragment = build_filter(self.filters.coerce(criteria), self.filters)
        sql: str = f"{self.select_sql} WHERE {fragment.join(' AND ')} ORDER BY {self.order_by}"
        return await fetch_rows(db, sql, fragment.values)

    async def update(
        self,
        db: AsyncSession,
        key: Any,
        data: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        """전달된 필드만 부분 업데이트합니다.

        Partially update the row with ``key``. The key binds the placeholder
        right after the generated assignments.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            key: 업데이트할 행의 키 (Key of the row to update)
            data: 변경할 필드와 값, 입력 순서 유지 (Fields to set, in insertion order)

        Returns:
            dict[str, Any] | None: 업데이트된 행 또는 None (Updated row or None)

        Raises:
            QueryBuildError: 데이터가 비어 있을 때 (EMPTY_INPUT on empty data)
        """
        fragment: QueryFragment = build_update(data, self.column_overrides)
        sql: str = (
            f"UPDATE {self.table} "
            f"SET {fragment.join(', ')} "
            f"WHERE {self.key_column} = ${fragment.next_index} "
            f"RETURNING {self.returning}"
        )
        rows = await fetch_rows(db, sql, [*fragment.values, key])
        return rows[0] if rows else None

    async def delete(self, db: AsyncSession, key: Any) -> bool:
        """키로 행을 삭제합니다: Delete by key; False when no row matched."""
        rows = await fetch_rows(
            db,
            f"DELETE FROM {self.table} WHERE {self.key_column} = $1 RETURNING {self.key_column}",
            [key],
        )
        return bool(rows)
