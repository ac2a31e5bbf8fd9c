"""API 라우터 패키지: 모든 엔드포인트 통합.

API Router package: Aggregates the entity routers into a single router
for inclusion in the FastAPI application.

Included routers:
    - companies: 회사 관리 및 검색 (Company management and search)
    - jobs: 채용 공고 관리 및 검색 (Job management and search)
"""

from fastapi import APIRouter

from app.api.companies import router as companies_router
from app.api.jobs import router as jobs_router

api_router: APIRouter = APIRouter()

api_router.include_router(companies_router, prefix="/companies", tags=["Companies"])
api_router.include_router(jobs_router, prefix="/jobs", tags=["Jobs"])
