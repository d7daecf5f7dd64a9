"""인증 서비스 — 관리자 로그인 비즈니스 로직.

Auth Service — verifies admin credentials and issues access tokens.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.models.user import User
from adminbase.repositories.user_repository import user_repository
from adminbase.schemas.auth import LoginRequest, TokenResponse
from adminbase.utils.exceptions import UnauthorizedError
from adminbase.utils.jwt import create_access_token
from adminbase.utils.password import verify_password


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스 (Authentication service)."""

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """아이디/비밀번호를 검증하고 액세스 토큰을 발급합니다.

        Verify username and password and issue an access token.
        Unknown users, wrong passwords and inactive accounts all fail with
        the same message.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 (Login request)

        Returns:
            TokenResponse: 토큰 응답 (Access token response)

        Raises:
            UnauthorizedError: 인증 실패 시 (Invalid credentials or inactive user)
        """
        user: User | None = await user_repository.get_by_username(db, data.username)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Invalid username or password")
        if not user.is_active:
            raise UnauthorizedError("Invalid username or password")

        token: str = create_access_token({"sub": str(user.id), "username": user.username})
        return TokenResponse(access_token=token)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
