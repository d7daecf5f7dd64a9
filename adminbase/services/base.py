"""기본 CRUD 서비스 — 모든 CRUD 리소스 서비스의 부모 클래스.

Base CRUD Service — Parent class for every CRUD resource service.
Implements paged listing, sorted listing, detail retrieval, create,
update, delete and Excel export once, parameterized over the entity, the
list view, the detail view, the query (filter) and the request types.

Entity → view copies match by field name (pydantic ``from_attributes``);
request → entity copies match by column name. List and detail views get
their audit display names filled from the users table.

Usage:
    class DeptService(BaseService[Dept, DeptView, DeptDetailView, DeptQuery, DeptRequest]):
        def __init__(self) -> None:
            super().__init__(dept_repository, DeptView, DeptDetailView, export_sheet_name="Departments")
"""

import logging
from collections.abc import Sequence
from typing import Any, BinaryIO, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.config import settings
from adminbase.database import transaction
from adminbase.repositories.base import BaseRepository, ModelType
from adminbase.schemas.base import BaseDetailView, BaseRequest, BaseView
from adminbase.schemas.common import PageData
from adminbase.schemas.query import PageQuery, SortQuery
from adminbase.services.user_service import UserService, user_service as default_user_service
from adminbase.utils.excel import export_excel
from adminbase.utils.exceptions import BadRequestError, NotFoundError, none_on_error
from adminbase.utils.query_helper import build_conditions

logger = logging.getLogger(__name__)

ViewType = TypeVar("ViewType", bound=BaseView)
DetailType = TypeVar("DetailType", bound=BaseDetailView)
FilterType = TypeVar("FilterType", bound=BaseModel)
RequestType = TypeVar("RequestType", bound=BaseRequest)
TargetType = TypeVar("TargetType", bound=BaseModel)

# 요청에서 복사하지 않는 컬럼 — 서비스가 직접 관리 (Columns managed by the service, never copied from a request)
_PROTECTED_COLUMNS: frozenset[str] = frozenset(
    {"id", "create_user", "create_time", "update_user", "update_time"}
)


class BaseService(Generic[ModelType, ViewType, DetailType, FilterType, RequestType]):
    """제네릭 CRUD 서비스.

    Generic CRUD service.

    Attributes:
        repository: 엔티티 레포지토리 (Repository of the entity)
        model: 엔티티 ORM 클래스 (Entity ORM class, taken from the repository)
        view_class: 목록 뷰 클래스 (List view class)
        detail_class: 상세 뷰 클래스 (Detail view class)
        export_sheet_name: 내보내기 시트 이름 (Worksheet title for exports)
        user_service: 감사 표시 이름 조회 서비스 (Audit display name lookup)
    """

    def __init__(
        self,
        repository: BaseRepository[ModelType],
        view_class: type[ViewType],
        detail_class: type[DetailType],
        export_sheet_name: str | None = None,
        user_service: UserService | None = None,
    ) -> None:
        self.repository: BaseRepository[ModelType] = repository
        self.model: type[ModelType] = repository.model
        self.view_class: type[ViewType] = view_class
        self.detail_class: type[DetailType] = detail_class
        self.export_sheet_name: str = export_sheet_name or settings.EXPORT_SHEET_NAME
        self.user_service: UserService = user_service or default_user_service

    # --- Read ---

    async def page(
        self,
        db: AsyncSession,
        query: FilterType | None,
        page_query: PageQuery,
    ) -> PageData[ViewType]:
        """조건에 맞는 레코드를 페이지 단위로 조회합니다.

        Return one page of list views matching ``query``, ordered per
        ``page_query``, with the creator display name filled.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 조회 조건 (Filter, None = no filter)
            page_query: 페이지/정렬 조건 (Page number, size and sort)

        Returns:
            PageData[ViewType]: 페이지 항목과 전체 개수 (Page items and total count)
        """
        entities, total = await self.repository.get_paginated(
            db,
            build_conditions(query, self.model),
            self._order_by(page_query),
            page_query.page,
            page_query.size,
        )
        views: list[ViewType] = [self.view_class.model_validate(e, from_attributes=True) for e in entities]
        for view in views:
            await self.fill(db, view)
        return PageData[self.view_class](list=views, total=total)

    async def get(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> DetailType:
        """ID로 상세 정보를 조회합니다.

        Return the detail view of record ``record_id`` with both audit
        display names filled.

        Raises:
            NotFoundError: 레코드가 없을 때 (Record does not exist)
        """
        entity: ModelType = await self.get_by_id(db, record_id)
        detail: DetailType = self.detail_class.model_validate(entity, from_attributes=True)
        await self.fill_detail(db, detail)
        return detail

    async def export(
        self,
        db: AsyncSession,
        query: FilterType | None,
        sort_query: SortQuery | None,
        sink: BinaryIO,
    ) -> None:
        """조건에 맞는 레코드를 Excel 파일로 내보냅니다.

        Write every record matching ``query`` as detail views to an xlsx
        workbook on ``sink``. Uses the same filter and ordering as ``list``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 조회 조건 (Filter)
            sort_query: 정렬 조건 (Sort)
            sink: 출력 바이너리 스트림 (Writable binary stream)
        """
        details: list[DetailType] = await self._list(db, query, sort_query, self.detail_class)
        for detail in details:
            await self.fill_detail(db, detail)
        export_excel(details, self.export_sheet_name, self.detail_class, sink)
        logger.info("Exported %d %s rows", len(details), self.model.__name__)

    # --- Write ---

    async def create(
        self,
        db: AsyncSession,
        request: RequestType | None,
        operator_id: int | None = None,
    ) -> int:
        """새 레코드를 생성합니다.

        Insert a record built from ``request`` inside one transaction and
        return its generated id. An absent or empty request is a no-op
        returning 0.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            request: 생성 요청 (Create request)
            operator_id: 작업자 사용자 ID, create_user에 기록 (Acting user id)

        Returns:
            int: 생성된 레코드 ID, 빈 요청이면 0 (New record id, 0 for an empty request)
        """
        if request is None:
            return 0
        data: dict[str, Any] = self._copy_to_entity(request, exclude_none=True)
        if not data:
            return 0
        if operator_id is not None:
            data["create_user"] = operator_id

        async with transaction(db):
            entity: ModelType = await self.repository.create(db, data)
            new_id: int = entity.id
        return new_id

    async def update(
        self,
        db: AsyncSession,
        request: RequestType,
        operator_id: int | None = None,
    ) -> None:
        """기존 레코드를 수정합니다.

        Update record ``request.id`` inside one transaction. Only fields
        explicitly set on the request are written; everything else keeps
        its stored value. A missing record is left as is.

        Raises:
            BadRequestError: 요청에 ID가 없을 때 (Request carries no id)
        """
        if request.id is None:
            raise BadRequestError("ID is required for update")
        data: dict[str, Any] = self._copy_to_entity(request, exclude_unset=True)
        if operator_id is not None:
            data["update_user"] = operator_id

        async with transaction(db):
            updated: ModelType | None = await self.repository.update(db, request.id, data)
        if updated is None:
            logger.debug("Update skipped, %s [%s] does not exist", self.model.__name__, request.id)

    async def delete(
        self,
        db: AsyncSession,
        ids: Sequence[int],
    ) -> None:
        """여러 레코드를 일괄 삭제합니다.

        Delete every record in ``ids`` inside one transaction. Ids that do
        not exist are ignored.
        """
        async with transaction(db):
            await self.repository.delete_by_ids(db, ids)

    # --- Helpers ---

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType:
        """ID로 엔티티를 조회하고, 없으면 NotFoundError를 발생시킵니다.

        Raises:
            NotFoundError: 레코드가 없을 때, 메시지에 ID 포함 (Record missing; detail carries the id)
        """
        entity: ModelType | None = await self.repository.get_by_id(db, record_id)
        if entity is None:
            raise NotFoundError(f"Record with ID [{record_id}] no longer exists")
        return entity

    async def _list(
        self,
        db: AsyncSession,
        query: FilterType | None,
        sort_query: SortQuery | None,
        target_class: type[TargetType],
    ) -> list[TargetType]:
        entities = await self.repository.get_all(
            db,
            build_conditions(query, self.model),
            self._order_by(sort_query),
        )
        return [target_class.model_validate(e, from_attributes=True) for e in entities]

    def _order_by(self, sort_query: SortQuery | None) -> list[Any]:
        # 정렬 미지정 시 기본 키 오름차순 — 페이지 경계 고정 (Primary key order keeps pages stable)
        orders: list[tuple[str, bool]] = sort_query.orders() if sort_query is not None else []
        if not orders:
            return [self.model.id.asc()]

        columns = inspect(self.model).columns
        clauses: list[Any] = []
        for column_name, ascending in orders:
            if column_name not in columns:
                raise BadRequestError(f"Unknown sort column [{column_name}]")
            column = getattr(self.model, column_name)
            clauses.append(column.asc() if ascending else column.desc())
        return clauses

    def _copy_to_entity(
        self,
        request: BaseModel,
        exclude_unset: bool = False,
        exclude_none: bool = False,
    ) -> dict[str, Any]:
        """요청 필드 중 엔티티 컬럼과 이름이 같은 것만 복사합니다.

        Copy the request fields whose names match an entity column,
        skipping the service-managed id and audit columns.

        Raises:
            BadRequestError: NOT NULL 컬럼에 null을 명시했을 때
                             (An explicit null targets a NOT NULL column)
        """
        columns = inspect(self.model).columns
        values: dict[str, Any] = request.model_dump(exclude_unset=exclude_unset, exclude_none=exclude_none)
        data: dict[str, Any] = {
            name: value
            for name, value in values.items()
            if name in columns and name not in _PROTECTED_COLUMNS
        }
        for name, value in data.items():
            if value is None and not columns[name].nullable:
                raise BadRequestError(f"Field [{name}] must not be null")
        return data

    async def fill(self, db: AsyncSession, view: BaseModel) -> None:
        """목록 뷰의 생성자 표시 이름을 채웁니다.

        Fill ``create_user_string`` when it is unset and a creator id is
        present. A failed lookup leaves the field unset.
        """
        if not isinstance(view, BaseView):
            return
        if view.create_user is not None and view.create_user_string is None:
            view.create_user_string = await none_on_error(
                self.user_service.get_nickname_by_id(db, view.create_user)
            )

    async def fill_detail(self, db: AsyncSession, detail: BaseModel) -> None:
        """상세 뷰의 생성자/수정자 표시 이름을 채웁니다.

        Fill both audit display names of a detail view. A failed lookup
        leaves the field unset.
        """
        if not isinstance(detail, BaseDetailView):
            return
        await self.fill(db, detail)
        if detail.update_user is not None and detail.update_user_string is None:
            detail.update_user_string = await none_on_error(
                self.user_service.get_nickname_by_id(db, detail.update_user)
            )

    # ``list``는 내장 list를 가리므로 클래스 마지막에 정의
    # Defined last: the method name shadows the builtin inside the class body
    async def list(
        self,
        db: AsyncSession,
        query: FilterType | None,
        sort_query: SortQuery | None,
    ) -> list[ViewType]:
        """조건에 맞는 모든 레코드를 정렬하여 조회합니다.

        Return every list view matching ``query``, ordered per
        ``sort_query`` (camelCase sort fields are mapped to snake_case
        columns). Returns an empty list, never None, when nothing matches.
        """
        views: list[ViewType] = await self._list(db, query, sort_query, self.view_class)
        for view in views:
            await self.fill(db, view)
        return views
