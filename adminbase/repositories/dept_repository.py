"""부서 레포지토리.

Department Repository — CRUD plus the child lookup used before deletion.
"""

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.models.dept import Dept
from adminbase.repositories.base import BaseRepository


class DeptRepository(BaseRepository[Dept]):
    """부서 테이블 레포지토리 (Repository for the depts table)."""

    def __init__(self) -> None:
        super().__init__(Dept)

    async def count_children(
        self,
        db: AsyncSession,
        parent_ids: Sequence[int],
    ) -> int:
        """주어진 부서들의 하위 부서 수를 셉니다 (Count departments under ``parent_ids``)."""
        if not parent_ids:
            return 0
        result = await db.execute(
            select(func.count())
            .select_from(Dept)
            .where(Dept.parent_id.in_(list(parent_ids)), Dept.id.not_in(list(parent_ids)))
        )
        return result.scalar() or 0


# 싱글턴 인스턴스 — Singleton instance
dept_repository: DeptRepository = DeptRepository()
