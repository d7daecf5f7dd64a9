"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates all admin-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - auth: 관리자 로그인 (Admin login)
    - depts: 부서 CRUD (Department CRUD)
    - announcements: 공지사항 CRUD (Announcement CRUD)
"""

from fastapi import APIRouter

from adminbase.api.admin.announcements import router as announcements_router
from adminbase.api.admin.auth import router as auth_router
from adminbase.api.admin.depts import router as depts_router

admin_router: APIRouter = APIRouter()

admin_router.include_router(auth_router, prefix="/auth", tags=["Admin Auth"])
admin_router.include_router(depts_router, prefix="/depts", tags=["Admin Departments"])
admin_router.include_router(announcements_router, prefix="/announcements", tags=["Admin Announcements"])
