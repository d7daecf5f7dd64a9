"""부서 Pydantic 스키마 정의.

Department query, view and request schemas.
"""

from typing import Annotated

from pydantic import BaseModel, Field

from adminbase.schemas.base import BaseDetailView, BaseRequest, BaseView
from adminbase.utils.query_helper import QueryCondition, QueryType


class DeptQuery(BaseModel):
    """부서 조회 조건 (Department filter)."""

    name: Annotated[str | None, QueryCondition(QueryType.INNER_LIKE)] = None  # 이름 부분 일치 (Name contains)
    parent_id: int | None = None
    status: int | None = None


class DeptView(BaseView):
    """부서 목록 뷰 (Department list view)."""

    name: str = Field(title="Name")
    parent_id: int = Field(title="Parent ID")
    sort: int = Field(title="Sort")
    status: int = Field(title="Status")


class DeptDetailView(BaseDetailView):
    """부서 상세 뷰 (Department detail view)."""

    name: str = Field(title="Name")
    parent_id: int = Field(title="Parent ID")
    description: str | None = Field(default=None, title="Description")
    sort: int = Field(title="Sort")
    status: int = Field(title="Status")


class DeptRequest(BaseRequest):
    """부서 생성/수정 요청.

    Department create/update request. Unset fields are left untouched on update.
    """

    name: str | None = Field(default=None, min_length=1, max_length=64)
    parent_id: int | None = None
    description: str | None = Field(default=None, max_length=512)
    sort: int | None = None
    status: int | None = Field(default=None, ge=1, le=2)  # 1=활성, 2=비활성 (1 enabled, 2 disabled)
