"""관리자 공지사항 라우터 — 공지사항 CRUD 엔드포인트.

Admin Announcement Router — standard CRUD endpoints for announcements.
"""

from fastapi import APIRouter

from adminbase.api.base import build_crud_router
from adminbase.schemas.announcement import (
    AnnouncementDetailView,
    AnnouncementQuery,
    AnnouncementRequest,
    AnnouncementView,
)
from adminbase.services.announcement_service import announcement_service

router: APIRouter = build_crud_router(
    announcement_service,
    AnnouncementQuery,
    AnnouncementRequest,
    AnnouncementView,
    AnnouncementDetailView,
    export_filename="announcements",
)
