"""채용 공고 서비스: 공고 CRUD 및 검색 비즈니스 로직.

Job Service: Business logic for job CRUD and search.
"""

from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.query import QueryBuildError
from app.repositories.company_repository import company_repository
from app.repositories.job_repository import job_repository
from app.schemas.job import JobCreate, JobResponse, JobUpdate
from app.utils.exceptions import BadRequestError, NotFoundError


class JobService:
    """채용 공고 관련 비즈니스 로직을 처리하는 서비스.

    Service handling job business logic.
    """

    async def list_jobs(
        self,
        db: AsyncSession,
        criteria: Mapping[str, Any] | None = None,
    ) -> list[JobResponse]:
        """공고 목록을 조회합니다. 필터가 있으면 검색합니다.

        List all jobs ordered by id, or search when criteria are given.
        ``hasEquity=true`` keeps jobs with positive equity; ``hasEquity=false``
        does not filter at all. A search that matches nothing is not found.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            criteria: 쿼리 문자열 필터 (title, minSalary, hasEquity)

        Returns:
            list[JobResponse]: 공고 목록 (List of jobs)

        Raises:
            BadRequestError: 필터가 유효하지 않을 때 (Invalid filter)
            NotFoundError: 검색 결과가 없을 때 (Search matched no job)
        """
        if not criteria:
            rows = await job_repository.get_all(db)
            return [JobResponse(**row) for row in rows]

        try:
            rows = await job_repository.search(db, criteria)
        except QueryBuildError as exc:
            raise BadRequestError.from_query_error(exc)
        if not rows:
            raise NotFoundError("No job was found matching this filter")
        return [JobResponse(**row) for row in rows]

    async def get_job(self, db: AsyncSession, job_id: int) -> JobResponse:
        row = await job_repository.get_by_key(db, job_id)
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        return JobResponse(**row)

    async def create_job(self, db: AsyncSession, data: JobCreate) -> JobResponse:
        """새 채용 공고를 생성합니다.

        Create a job under an existing company.

        Raises:
            NotFoundError: 소속 회사가 없을 때 (Owning company not found)
        """
        if await company_repository.get_by_key(db, data.company_handle) is None:
            raise NotFoundError("Company Not Found")

        row = await job_repository.create(db, data.model_dump())
        return JobResponse(**row)

    async def update_job(self, db: AsyncSession, job_id: int, data: JobUpdate) -> JobResponse:
        """공고를 부분 수정합니다.

        Partially update a job with the fields present in the request.

        Raises:
            BadRequestError: 변경할 필드가 없을 때 (No fields given)
            NotFoundError: 공고를 찾을 수 없을 때 (Job not found)
        """
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True)
        try:
            row = await job_repository.update(db, job_id, update_data)
        except QueryBuildError as exc:
            raise BadRequestError.from_query_error(exc)
        if row is None:
            raise NotFoundError(f"No job: {job_id}")
        return JobResponse(**row)

    async def delete_job(self, db: AsyncSession, job_id: int) -> None:
        if not await job_repository.delete(db, job_id):
            raise NotFoundError(f"No job: {job_id}")


# 싱글턴 인스턴스: Singleton instance
job_service: JobService = JobService()
