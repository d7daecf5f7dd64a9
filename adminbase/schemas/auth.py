"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication request/response schemas.
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """관리자 로그인 요청 스키마.

    Attributes:
        username: 로그인 아이디 (Login username)
        password: 비밀번호 (Plain text, verified against the bcrypt hash)
    """

    username: str
    password: str


class TokenResponse(BaseModel):
    """JWT 토큰 발급 응답 스키마 (Issued access token)."""

    access_token: str
    token_type: str = "bearer"
