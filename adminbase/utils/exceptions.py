"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Pre-configured HTTPException subclasses raised by services and repositories,
plus a helper that turns a failing lookup into ``None``.

Usage:
    from adminbase.utils.exceptions import NotFoundError
    raise NotFoundError("Record with ID [42] no longer exists")
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 레코드를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested record (department, announcement, user) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised when a write would violate a uniqueness rule
    (e.g. two sibling departments with the same name).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    Raised when authentication is missing, invalid, or expired.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is invalid beyond what Pydantic validation catches
    (e.g. an unknown sort column, an update without a target id).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def none_on_error(awaitable: Awaitable[T]) -> T | None:
    """대기 가능한 호출의 결과를 반환하고, 실패 시 None을 반환합니다.

    Await ``awaitable`` and return its result, or ``None`` if it raises.
    The failure is logged at debug level and never propagated.
    """
    try:
        return await awaitable
    except Exception as exc:
        logger.debug("Suppressed lookup failure: %s: %s", type(exc).__name__, exc)
        return None
