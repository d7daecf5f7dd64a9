"""공지사항 ORM 모델 정의.

Announcement SQLAlchemy ORM model definition.

Tables:
    - announcements: 공지사항 (System announcements with an effective window)
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from adminbase.database import Base
from adminbase.models.audit import AuditMixin


class Announcement(AuditMixin, Base):
    """공지사항 모델.

    Announcement model.

    Attributes:
        title: 공지 제목 (Title)
        content: 공지 내용 (Body text)
        type: 공지 유형 (Type code, e.g. "notice", "event")
        effective_time: 게시 시작 일시 (Shown from, optional)
        terminate_time: 게시 종료 일시 (Shown until, optional)
        sort: 정렬 순서 (Display order)
    """

    __tablename__ = "announcements"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    effective_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    terminate_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    sort: Mapped[int] = mapped_column(Integer, default=999, nullable=False)
