"""FastAPI 의존성 주입 모듈 — 인증.

FastAPI dependency injection module — Authentication.
Extracts the current admin user from the bearer JWT; write endpoints use
the user's id as the audit operator.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    3. 페이로드의 "sub" 필드로 DB에서 사용자를 조회
       (User is fetched from DB using payload "sub" field)
    4. 사용자 활성 상태를 확인 (User active status is verified)
"""

from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.database import get_db
from adminbase.models.user import User
from adminbase.repositories.user_repository import user_repository
from adminbase.utils.exceptions import UnauthorizedError
from adminbase.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — 헤더 누락 시 직접 401 처리 (auto_error=False: missing header handled below)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer JWT and return the authenticated, active user.

    Raises:
        UnauthorizedError: 토큰 누락/무효/만료, 사용자 없음/비활성
                           (Missing, invalid or expired token; unknown or inactive user)
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")
    try:
        payload: dict = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise UnauthorizedError("Invalid token type")
        user_id: int = int(payload["sub"])
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        raise UnauthorizedError("Invalid or expired token")

    user: User | None = await user_repository.get_by_id(db, user_id)
    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")
    return user
