"""공지사항 서비스 — 공지사항 CRUD 비즈니스 로직.

Announcement Service — Announcement CRUD on top of ``BaseService``.
"""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.models.announcement import Announcement
from adminbase.repositories.announcement_repository import announcement_repository
from adminbase.schemas.announcement import (
    AnnouncementDetailView,
    AnnouncementQuery,
    AnnouncementRequest,
    AnnouncementView,
)
from adminbase.services.base import BaseService
from adminbase.utils.exceptions import BadRequestError


def _naive_utc(value: datetime) -> datetime:
    # 저장값은 드라이버에 따라 naive로 반환됨, naive는 UTC로 간주 (Stored values may come back naive; naive means UTC)
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class AnnouncementService(
    BaseService[Announcement, AnnouncementView, AnnouncementDetailView, AnnouncementQuery, AnnouncementRequest]
):
    """공지사항 서비스 (Announcement service)."""

    def __init__(self) -> None:
        super().__init__(
            announcement_repository,
            AnnouncementView,
            AnnouncementDetailView,
            export_sheet_name="Announcements",
        )

    async def create(
        self,
        db: AsyncSession,
        request: AnnouncementRequest | None,
        operator_id: int | None = None,
    ) -> int:
        """공지사항을 생성합니다.

        Create an announcement. Title, content and type are required and
        the effective window must not end before it starts.
        """
        if request is not None and request.model_fields_set:
            if not request.title or request.content is None or not request.type:
                raise BadRequestError("Title, content and type are required")
            self._check_window(request.effective_time, request.terminate_time)
        return await super().create(db, request, operator_id)

    async def update(
        self,
        db: AsyncSession,
        request: AnnouncementRequest,
        operator_id: int | None = None,
    ) -> None:
        """공지사항을 수정합니다.

        Update an announcement. The window is checked after merging the
        request over the stored effective/terminate times.
        """
        effective_time: datetime | None = request.effective_time
        terminate_time: datetime | None = request.terminate_time
        if request.id is not None:
            current: Announcement | None = await announcement_repository.get_by_id(db, request.id)
            if current is not None:
                fields_set = request.model_fields_set
                if "effective_time" not in fields_set:
                    effective_time = current.effective_time
                if "terminate_time" not in fields_set:
                    terminate_time = current.terminate_time
        self._check_window(effective_time, terminate_time)
        await super().update(db, request, operator_id)

    @staticmethod
    def _check_window(effective_time: datetime | None, terminate_time: datetime | None) -> None:
        if (
            effective_time is not None
            and terminate_time is not None
            and _naive_utc(terminate_time) < _naive_utc(effective_time)
        ):
            raise BadRequestError("Terminate time must not be earlier than effective time")


# 싱글턴 인스턴스 — Singleton instance
announcement_service: AnnouncementService = AnnouncementService()
