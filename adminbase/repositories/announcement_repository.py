"""공지사항 레포지토리.

Announcement Repository — plain CRUD on the announcements table.
"""

from adminbase.models.announcement import Announcement
from adminbase.repositories.base import BaseRepository


class AnnouncementRepository(BaseRepository[Announcement]):
    """공지사항 테이블 레포지토리 (Repository for the announcements table)."""

    def __init__(self) -> None:
        super().__init__(Announcement)


# 싱글턴 인스턴스 — Singleton instance
announcement_repository: AnnouncementRepository = AnnouncementRepository()
