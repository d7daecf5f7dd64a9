"""부서 서비스 — 부서 CRUD 비즈니스 로직.

Dept Service — Department CRUD on top of ``BaseService``, adding a
sibling-name uniqueness check on writes and a guard against deleting a
department that still has sub-departments.
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.models.dept import Dept
from adminbase.repositories.dept_repository import dept_repository
from adminbase.schemas.dept import DeptDetailView, DeptQuery, DeptRequest, DeptView
from adminbase.services.base import BaseService
from adminbase.utils.exceptions import BadRequestError, DuplicateError


class DeptService(BaseService[Dept, DeptView, DeptDetailView, DeptQuery, DeptRequest]):
    """부서 관련 비즈니스 로직을 처리하는 서비스 (Department service)."""

    def __init__(self) -> None:
        super().__init__(dept_repository, DeptView, DeptDetailView, export_sheet_name="Departments")

    async def _check_name_exists(
        self,
        db: AsyncSession,
        name: str,
        parent_id: int,
        exclude_id: int | None = None,
    ) -> None:
        # 같은 상위 부서 아래 이름 중복 확인 — Name must be unique among siblings
        exists: bool = await dept_repository.exists(
            db, {"name": name, "parent_id": parent_id}, exclude_id=exclude_id
        )
        if exists:
            raise DuplicateError(f"Department [{name}] already exists")

    async def create(
        self,
        db: AsyncSession,
        request: DeptRequest | None,
        operator_id: int | None = None,
    ) -> int:
        """부서를 생성합니다.

        Create a department.

        Raises:
            BadRequestError: 이름이 없을 때 (Name missing)
            DuplicateError: 같은 상위 부서에 같은 이름이 있을 때 (Sibling with the same name)
        """
        if request is not None and request.model_fields_set:
            if not request.name:
                raise BadRequestError("Department name is required")
            await self._check_name_exists(db, request.name, request.parent_id or 0)
        return await super().create(db, request, operator_id)

    async def update(
        self,
        db: AsyncSession,
        request: DeptRequest,
        operator_id: int | None = None,
    ) -> None:
        """부서를 수정합니다 (Update a department; renames are checked for duplicates)."""
        if request.id is not None and (request.name is not None or request.parent_id is not None):
            current: Dept | None = await dept_repository.get_by_id(db, request.id)
            if current is not None:
                name: str = request.name if request.name is not None else current.name
                parent_id: int = request.parent_id if request.parent_id is not None else current.parent_id
                await self._check_name_exists(db, name, parent_id, exclude_id=request.id)
        await super().update(db, request, operator_id)

    async def delete(
        self,
        db: AsyncSession,
        ids: Sequence[int],
    ) -> None:
        """부서를 삭제합니다.

        Delete departments.

        Raises:
            BadRequestError: 하위 부서가 남아 있을 때 (A department still has sub-departments)
        """
        if await dept_repository.count_children(db, ids) > 0:
            raise BadRequestError("Cannot delete a department that has sub-departments")
        await super().delete(db, ids)


# 싱글턴 인스턴스 — Singleton instance
dept_service: DeptService = DeptService()
