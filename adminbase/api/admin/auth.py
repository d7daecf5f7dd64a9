"""관리자 인증 라우터 — 관리자 로그인.

Admin Auth Router — exchanges username/password for an access token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.database import get_db
from adminbase.schemas.auth import LoginRequest, TokenResponse
from adminbase.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def admin_login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """관리자 로그인.

    Admin login endpoint. Returns 401 for unknown users, wrong passwords
    and inactive accounts.
    """
    return await auth_service.login(db, data)
