"""회사 서비스: 회사 CRUD 및 검색 비즈니스 로직.

Company Service: Business logic for company CRUD and search.
Translates query build errors into 400 and missing rows into 404.
"""

from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.query import QueryBuildError
from app.repositories.company_repository import company_repository
from app.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyJobResponse,
    CompanyResponse,
    CompanyUpdate,
)
from app.utils.exceptions import BadRequestError, DuplicateError, NotFoundError


class CompanyService:
    """회사 관련 비즈니스 로직을 처리하는 서비스: Service handling company logic."""

    async def list_companies(
        self,
        db: AsyncSession,
        criteria: Mapping[str, Any] | None = None,
    ) -> list[CompanyResponse]:
        """회사 목록을 조회합니다. 필터가 있으면 검색합니다.

        List all companies ordered by name, or search when criteria are given.
        A search that matches nothing is reported as not found rather than
        an empty list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            criteria: 쿼리 문자열 필터 (nameLike, minEmployees, maxEmployees)

        Returns:
            list[CompanyResponse]: 회사 목록 (List of companies)

        Raises:
            BadRequestError: 필터가 유효하지 않을 때 (Invalid filter)
            NotFoundError: 검색 결과가 없을 때 (Search matched no company)
        """
        if not criteria:
            rows = await company_repository.get_all(db)
            return [CompanyResponse(**row) for row in rows]

        try:
            rows = await company_repository.search(db, criteria)
        except QueryBuildError as exc:
            raise BadRequestError.from_query_error(exc)
        if not rows:
            raise NotFoundError("No company was found matching this filter")
        return [CompanyResponse(**row) for row in rows]

    async def get_company(self, db: AsyncSession, handle: str) -> CompanyDetailResponse:
        """회사 상세 정보를 채용 공고와 함께 조회합니다.

        Retrieve a company with its jobs.

        Raises:
            NotFoundError: 회사를 찾을 수 없을 때 (Company not found)
        """
        company = await company_repository.get_by_key(db, handle)
        if company is None:
            raise NotFoundError(f"No company: {handle}")

        jobs = await company_repository.get_jobs(db, handle)
        return CompanyDetailResponse(
            **company,
            jobs=[CompanyJobResponse(**job) for job in jobs],
        )

    async def create_company(self, db: AsyncSession, data: CompanyCreate) -> CompanyResponse:
        """새 회사를 생성합니다.

        Create a company.

        Raises:
            DuplicateError: 같은 handle이 이미 존재할 때 (Handle already taken)
        """
        if await company_repository.get_by_key(db, data.handle) is not None:
            raise DuplicateError(f"Duplicate company: {data.handle}")

        row = await company_repository.create(db, data.model_dump())
        return CompanyResponse(**row)

    async def update_company(
        self,
        db: AsyncSession,
        handle: str,
        data: CompanyUpdate,
    ) -> CompanyResponse:
        """회사 정보를 부분 수정합니다.

        Partially update a company with the fields present in the request.

        Raises:
            BadRequestError: 변경할 필드가 없을 때 (No fields given)
            NotFoundError: 회사를 찾을 수 없을 때 (Company not found)
        """
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True, by_alias=True)
        try:
            row = await company_repository.update(db, handle, update_data)
        except QueryBuildError as exc:
            raise BadRequestError.from_query_error(exc)
        if row is None:
            raise NotFoundError(f"No company: {handle}")
        return CompanyResponse(**row)

    async def delete_company(self, db: AsyncSession, handle: str) -> None:
        """회사를 삭제합니다: Delete a company; 404 when missing."""
        if not await company_repository.delete(db, handle):
            raise NotFoundError(f"No company: {handle}")


# 싱글턴 인스턴스: Singleton instance
company_service: CompanyService = CompanyService()
