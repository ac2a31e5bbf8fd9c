"""채용 공고 라우터: 공고 CRUD 및 검색 엔드포인트.

Job Router: CRUD and search endpoints for jobs.

Permission Matrix:
    - 목록/검색/상세 조회: 누구나 (Anyone)
    - 생성/수정/삭제: 관리자만 (Admin only)
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.schemas.job import JobCreate, JobResponse, JobUpdate
from app.services.job_service import job_service

router: APIRouter = APIRouter()


@router.get("", response_model=dict[str, list[JobResponse]])
async def list_jobs(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict[str, list[JobResponse]]:
    """공고 목록을 조회합니다. 쿼리 문자열이 있으면 필터 검색.

    List jobs, or filter by ``title``, ``minSalary`` and ``hasEquity``.
    Any other query key is a 400.
    """
    criteria: dict[str, str] = dict(request.query_params)
    jobs = await job_service.list_jobs(db, criteria)
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=dict[str, JobResponse])
async def get_job(
    job_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict[str, JobResponse]:
    return {"job": await job_service.get_job(db, job_id)}


@router.post("", response_model=dict[str, JobResponse], status_code=201)
async def create_job(
    data: JobCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    _admin: Annotated[dict[str, Any], Depends(require_admin)],
) -> dict[str, JobResponse]:
    """새 공고를 생성합니다. 관리자만 가능.

    Create a job under an existing company. Admin only.
    """
    job: JobResponse = await job_service.create_job(db, data)
    await db.commit()
    return {"job": job}


@router.patch("/{job_id}", response_model=dict[str, JobResponse])
async def update_job(
    job_id: int,
    data: JobUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    _admin: Annotated[dict[str, Any], Depends(require_admin)],
) -> dict[str, JobResponse]:
    """공고를 부분 수정합니다. 관리자만 가능."""
    job: JobResponse = await job_service.update_job(db, job_id, data)
    await db.commit()
    return {"job": job}


@router.delete("/{job_id}")
async def delete_job(
    job_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    _admin: Annotated[dict[str, Any], Depends(require_admin)],
) -> dict[str, int]:
    """공고를 삭제합니다. 관리자만 가능."""
    await job_service.delete_job(db, job_id)
    await db.commit()
    return {"deleted": job_id}
