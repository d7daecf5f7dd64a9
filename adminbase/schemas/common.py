"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared by every CRUD resource:
the paged list wrapper, the created-id response, and the generic message.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PageData(BaseModel, Generic[T]):
    """페이지 조회 결과 스키마.

    Paged listing result.

    Attributes:
        list: 현재 페이지 항목 목록 (Items of the requested page)
        total: 조건에 맞는 전체 항목 수 (Total matching rows across all pages)
    """

    # 필드 이름이 내장 list를 가리므로 typing.List 사용 (Field name shadows the builtin)
    list: List[T] = Field(default_factory=list)
    total: int = 0  # 전체 항목 수 (Total item count)


class IdResponse(BaseModel):
    """생성된 레코드 ID 응답 스키마 (Identifier of a newly created record)."""

    id: int


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message response schema for simple confirmations
    (update succeeded, and so on).
    """

    message: str  # 응답 메시지 (Human-readable confirmation message)
