"""사용자 레포지토리 — 로그인 및 감사 표시 이름 조회.

User Repository — lookups for login and audit display names.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.models.user import User
from adminbase.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블 레포지토리 (Repository for the users table)."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_username(
        self,
        db: AsyncSession,
        username: str,
    ) -> User | None:
        """로그인 아이디로 사용자를 조회합니다.

        Retrieve a user by login username.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 로그인 아이디 (Login username)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_nickname(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> str | None:
        """사용자 표시 이름만 조회합니다 (Fetch only the nickname column)."""
        result = await db.execute(select(User.nickname).where(User.id == user_id))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
