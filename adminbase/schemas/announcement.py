"""공지사항 Pydantic 스키마 정의.

Announcement query, view and request schemas.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field

from adminbase.schemas.base import BaseDetailView, BaseRequest, BaseView
from adminbase.utils.query_helper import QueryCondition, QueryType


class AnnouncementQuery(BaseModel):
    """공지사항 조회 조건.

    Announcement filter.

    Attributes:
        title: 제목 부분 일치 (Title contains)
        type: 공지 유형 일치 (Exact type)
        create_time: 생성 일시 범위 [시작, 끝] (Creation time range [from, to])
    """

    title: Annotated[str | None, QueryCondition(QueryType.INNER_LIKE)] = None
    type: str | None = None
    create_time: Annotated[list[datetime] | None, QueryCondition(QueryType.BETWEEN)] = None


class AnnouncementView(BaseView):
    """공지사항 목록 뷰 (Announcement list view)."""

    title: str = Field(title="Title")
    type: str = Field(title="Type")
    effective_time: datetime | None = Field(default=None, title="Effective At")
    terminate_time: datetime | None = Field(default=None, title="Terminates At")


class AnnouncementDetailView(BaseDetailView):
    """공지사항 상세 뷰 — 본문 포함 (Announcement detail view with body)."""

    title: str = Field(title="Title")
    content: str = Field(title="Content")
    type: str = Field(title="Type")
    effective_time: datetime | None = Field(default=None, title="Effective At")
    terminate_time: datetime | None = Field(default=None, title="Terminates At")
    sort: int = Field(title="Sort")


class AnnouncementRequest(BaseRequest):
    """공지사항 생성/수정 요청 (Announcement create/update request)."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    type: str | None = Field(default=None, max_length=30)
    effective_time: datetime | None = None
    terminate_time: datetime | None = None
    sort: int | None = None
