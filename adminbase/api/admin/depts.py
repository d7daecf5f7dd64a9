"""관리자 부서 라우터 — 부서 CRUD 엔드포인트.

Admin Department Router — standard CRUD endpoints for departments.
"""

from fastapi import APIRouter

from adminbase.api.base import build_crud_router
from adminbase.schemas.dept import DeptDetailView, DeptQuery, DeptRequest, DeptView
from adminbase.services.dept_service import dept_service

router: APIRouter = build_crud_router(
    dept_service,
    DeptQuery,
    DeptRequest,
    DeptView,
    DeptDetailView,
    export_filename="depts",
)
