"""회사 라우터: 회사 CRUD 및 검색 엔드포인트.

Company Router: CRUD and search endpoints for companies.

Permission Matrix:
    - 목록/검색/상세 조회: 누구나 (Anyone)
    - 생성/수정/삭제: 관리자만 (Admin only)
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.schemas.company import (
    CompanyCreate,
    CompanyDetailResponse,
    CompanyResponse,
    CompanyUpdate,
)
from app.services.company_service import company_service

router: APIRouter = APIRouter()


@router.get("", response_model=dict[str, list[CompanyResponse]])
async def list_companies(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict[str, list[CompanyResponse]]:
    """회사 목록을 조회합니다. 쿼리 문자열이 있으면 필터 검색.

    List companies, or filter by ``nameLike``, ``minEmployees`` and
    ``maxEmployees``. Any other query key is a 400.
    """
    criteria: dict[str, str] = dict(request.query_params)
    companies = await company_service.list_companies(db, criteria)
    return {"companies": companies}


@router.get("/{handle}", response_model=dict[str, CompanyDetailResponse])
async def get_company(
    handle: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict[str, CompanyDetailResponse]:
    """회사 상세 정보를 조회합니다 (채용 공고 포함)."""
    return {"company": await company_service.get_company(db, handle)}


@router.post("", response_model=dict[str, CompanyResponse], status_code=201)
async def create_company(
    data: CompanyCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    _admin: Annotated[dict[str, Any], Depends(require_admin)],
) -> dict[str, CompanyResponse]:
    """새 회사를 생성합니다. 관리자만 가능.

    Create a company. Admin only.
    """
    company: CompanyResponse = await company_service.create_company(db, data)
    await db.commit()
    return {"company": company}


@router.patch("/{handle}", response_model=dict[str, CompanyResponse])
async def update_company(
    handle: str,
    data: CompanyUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    _admin: Annotated[dict[str, Any], Depends(require_admin)],
) -> dict[str, CompanyResponse]:
    """회사 정보를 부분 수정합니다. 관리자만 가능.

    Partially update a company. Admin only.
    """
    company: CompanyResponse = await company_service.update_company(db, handle, data)
    await db.commit()
    return {"company": company}


@router.delete("/{handle}")
async def delete_company(
    handle: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    _admin: Annotated[dict[str, Any], Depends(require_admin)],
) -> dict[str, str]:
    """회사를 삭제합니다. 관리자만 가능."""
    await company_service.delete_company(db, handle)
    await db.commit()
    return {"deleted": handle}
