"""정렬 및 페이지 조회 조건 스키마.

Sort and page query schemas.
Sort items use the ``"field,direction"`` form sent by the admin frontend,
e.g. ``createTime,desc``. Field names may be camelCase; they are converted
to the snake_case column names used by the ORM models.
"""

import re

from pydantic import BaseModel, Field

from adminbase.config import settings
from adminbase.utils.exceptions import BadRequestError

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """camelCase 이름을 snake_case로 변환합니다 (``createTime`` → ``create_time``)."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).lower()


class SortQuery(BaseModel):
    """정렬 조건 스키마.

    Sort query.

    Attributes:
        sort: 정렬 항목 목록, 각 항목은 "필드,asc|desc" 형식
              (Sort items, each "field" or "field,asc|desc")
    """

    sort: list[str] = Field(default_factory=list)

    def orders(self) -> list[tuple[str, bool]]:
        """정렬 항목을 (컬럼 이름, 오름차순 여부) 목록으로 변환합니다.

        Parse the sort items into ``(column_name, ascending)`` pairs.

        Raises:
            BadRequestError: 필드가 비었거나 방향이 asc/desc가 아닐 때
                             (Empty field or a direction other than asc/desc)
        """
        result: list[tuple[str, bool]] = []
        for item in self.sort:
            if not item or not item.strip():
                continue
            field, _, direction = item.partition(",")
            field = field.strip()
            direction = direction.strip().lower() or "asc"
            if not field:
                raise BadRequestError(f"Invalid sort item [{item}]")
            if direction not in ("asc", "desc"):
                raise BadRequestError(f"Invalid sort direction [{direction}]")
            result.append((to_snake_case(field), direction == "asc"))
        return result


class PageQuery(SortQuery):
    """페이지 조회 조건 스키마.

    Page query: sort items plus the 1-based page number and page size.
    """

    page: int = Field(default=1, ge=1)  # 페이지 번호 — 1부터 시작 (1-indexed)
    size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)
