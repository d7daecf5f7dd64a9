"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides the generic select-by-id, select-list, select-page, insert,
update-by-id and delete-by-ids operations the CRUD services build on.

Usage:
    class DeptRepository(BaseRepository[Dept]):
        def __init__(self) -> None:
            super().__init__(Dept)
"""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository over a model with a numeric ``id`` primary key.
    Writes only flush; committing is the caller's transaction scope.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def _select(
        self,
        conditions: Sequence[ColumnElement[bool]] | None = None,
        order_by: Sequence[Any] | None = None,
    ) -> Select:
        query: Select = select(self.model)
        if conditions:
            query = query.where(*conditions)
        if order_by:
            query = query.order_by(*order_by)
        # 세션에 남은 객체도 DB 값으로 갱신 (Refresh identity-map objects from the row)
        return query.execution_options(populate_existing=True)

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Id of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        result = await db.execute(self._select([self.model.id == record_id]))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        conditions: Sequence[ColumnElement[bool]] | None = None,
        order_by: Sequence[Any] | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given predicates.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            conditions: WHERE 조건식 목록 (Predicates, AND-ed together)
            order_by: 정렬 기준 목록 (ORDER BY clauses)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록, 없으면 빈 목록
                                 (Matching records; empty when none match)
        """
        result = await db.execute(self._select(conditions, order_by))
        return result.scalars().all()

    async def get_paginated(
        self,
        db: AsyncSession,
        conditions: Sequence[ColumnElement[bool]] | None = None,
        order_by: Sequence[Any] | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Retrieve one page of matching records plus the total match count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            conditions: WHERE 조건식 목록 (Predicates)
            order_by: 정렬 기준 목록 (ORDER BY clauses)
            page: 현재 페이지 번호, 1부터 시작 (Current page number, 1-based)
            per_page: 페이지당 레코드 수 (Number of records per page)

        Returns:
            tuple[Sequence[ModelType], int]: (레코드 목록, 전체 개수)
                                             (List of records, total count)
        """
        query: Select = self._select(conditions, order_by)

        # 전체 카운트 쿼리 — Total count query
        count_query: Select = select(func.count()).select_from(query.order_by(None).subquery())
        total: int = (await db.execute(count_query)).scalar() or 0

        # 오프셋 계산 및 페이지 적용 — Calculate offset and apply pagination
        offset: int = (page - 1) * per_page
        result = await db.execute(query.offset(offset).limit(per_page))
        items: Sequence[ModelType] = result.scalars().all()

        return items, total

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Insert a new record and load its generated primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 컬럼 값 (Column values for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Update the given columns of an existing record; columns absent from
        ``update_data`` keep their stored values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드 ID (Id of the record to update)
            update_data: 업데이트할 컬럼과 값 (Columns and values to set)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None if absent)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete_by_ids(
        self,
        db: AsyncSession,
        record_ids: Sequence[int],
    ) -> int:
        """여러 레코드를 ID 목록으로 일괄 삭제합니다.

        Bulk-delete records by id. Ids that do not exist are ignored.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_ids: 삭제할 레코드 ID 목록 (Ids to delete)

        Returns:
            int: 삭제된 행 수 (Number of rows deleted)
        """
        if not record_ids:
            return 0
        result = await db.execute(
            delete(self.model)
            .where(self.model.id.in_(list(record_ids)))
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()
        return result.rowcount or 0

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
        exclude_id: int | None = None,
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given column filters exists,
        optionally ignoring the record ``exclude_id`` (used on rename).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)
            exclude_id: 제외할 레코드 ID (Record id to ignore)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
