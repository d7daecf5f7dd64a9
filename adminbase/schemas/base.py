"""CRUD 리소스 공통 뷰/요청 스키마.

Base view and request schemas for CRUD resources.
Views are built from ORM entities by field name (``from_attributes``);
requests are copied onto entities by field name. The audit user ids are
hidden from JSON and exports; their resolved display names are shown.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseView(BaseModel):
    """목록 뷰 공통 필드.

    Common fields of a list view.

    Attributes:
        id: 레코드 ID (Record id)
        create_user: 생성자 ID — 응답에서 제외 (Creator id, hidden)
        create_user_string: 생성자 표시 이름 (Creator display name)
        create_time: 생성 일시 (Creation timestamp)
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(title="ID")
    create_user: int | None = Field(default=None, exclude=True)
    create_user_string: str | None = Field(default=None, title="Created By")
    create_time: datetime | None = Field(default=None, title="Created At")


class BaseDetailView(BaseView):
    """상세 뷰 공통 필드 — 수정자/수정 일시 추가.

    Common fields of a detail view: the list view fields plus the last
    updater and update time.
    """

    update_user: int | None = Field(default=None, exclude=True)
    update_user_string: str | None = Field(default=None, title="Updated By")
    update_time: datetime | None = Field(default=None, title="Updated At")


class BaseRequest(BaseModel):
    """생성/수정 요청 공통 필드.

    Common fields of a create/update request. ``id`` is ignored on create
    and must be set (from the URL) on update.
    """

    id: int | None = None
