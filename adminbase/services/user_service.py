"""사용자 서비스 — 감사 컬럼 표시 이름 조회.

User Service — resolves the display name (nickname) behind the numeric
user ids stored in audit columns.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.repositories.user_repository import user_repository
from adminbase.utils.exceptions import NotFoundError


class UserService:
    """사용자 조회 서비스 (User lookup service)."""

    async def get_nickname_by_id(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> str:
        """사용자 ID로 표시 이름을 조회합니다.

        Return the nickname of the user ``user_id``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User id)

        Returns:
            str: 사용자 표시 이름 (User display name)

        Raises:
            NotFoundError: 사용자가 없을 때 (User does not exist)
        """
        nickname: str | None = await user_repository.get_nickname(db, user_id)
        if nickname is None:
            raise NotFoundError(f"User with ID [{user_id}] does not exist")
        return nickname


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
