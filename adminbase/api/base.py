"""CRUD 라우터 팩토리 — BaseService 위에 표준 엔드포인트를 생성.

CRUD router factory.
Builds the standard admin endpoints (page, list, export, get, create,
update, delete) for any ``BaseService``. Filter fields of the query model
are read from the query string; ``sort`` is repeatable
(``?sort=createTime,desc&sort=id,asc``).

Usage:
    router = build_crud_router(
        dept_service, DeptQuery, DeptRequest, DeptView, DeptDetailView,
        export_filename="depts",
    )
"""

import types
from collections.abc import Callable
from datetime import datetime
from io import BytesIO
from typing import Annotated, Any, Union, get_args, get_origin

from fastapi import APIRouter, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.api.deps import get_current_user
from adminbase.config import settings
from adminbase.database import get_db
from adminbase.models.user import User
from adminbase.schemas.common import IdResponse, MessageResponse, PageData
from adminbase.schemas.query import PageQuery, SortQuery
from adminbase.services.base import BaseService
from adminbase.utils.excel import XLSX_MEDIA_TYPE
from adminbase.utils.exceptions import BadRequestError

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def _is_sequence(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin in _SEQUENCE_TYPES:
        return True
    if origin in (Union, types.UnionType):
        return any(_is_sequence(arg) for arg in get_args(annotation))
    return False


def query_model_dependency(query_class: type[BaseModel]) -> Callable[[Request], BaseModel]:
    """쿼리 문자열을 조회 모델로 변환하는 의존성을 생성합니다.

    Build a dependency that validates the request's query string into
    ``query_class``. Sequence fields collect repeated parameters.
    Validation failures surface as FastAPI's 422 response.
    """

    def dependency(request: Request) -> BaseModel:
        params = request.query_params
        raw: dict[str, Any] = {}
        for name, field in query_class.model_fields.items():
            key: str = field.alias or name
            if key not in params:
                continue
            raw[key] = params.getlist(key) if _is_sequence(field.annotation) else params[key]
        try:
            return query_class.model_validate(raw)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False)) from exc

    return dependency


def parse_ids(ids: str) -> list[int]:
    """쉼표로 구분된 ID 문자열을 정수 목록으로 변환합니다 ("1,2,3" → [1, 2, 3]).

    Raises:
        BadRequestError: 숫자가 아닌 항목이 있거나 비었을 때 (Non-numeric or empty list)
    """
    try:
        parsed: list[int] = [int(part) for part in ids.split(",") if part.strip()]
    except ValueError:
        raise BadRequestError(f"Invalid id list [{ids}]")
    if not parsed:
        raise BadRequestError("At least one id is required")
    return parsed


def build_crud_router(
    service: BaseService,
    query_class: type[BaseModel],
    request_class: type[BaseModel],
    view_class: type[BaseModel],
    detail_class: type[BaseModel],
    export_filename: str = "export",
) -> APIRouter:
    """BaseService에 대한 표준 CRUD 라우터를 생성합니다.

    Build the standard CRUD router for ``service``. Every endpoint
    requires an authenticated user; writes record the user as operator.

    Args:
        service: CRUD 서비스 (CRUD service)
        query_class: 조회 조건 모델 (Filter model read from the query string)
        request_class: 생성/수정 요청 모델 (Create/update body model)
        view_class: 목록 뷰 모델 (List view model)
        detail_class: 상세 뷰 모델 (Detail view model)
        export_filename: 내보내기 파일 이름 접두사 (Export file name prefix)

    Returns:
        APIRouter: 생성된 라우터 (The router; include it under a resource prefix)
    """
    router: APIRouter = APIRouter(dependencies=[Depends(get_current_user)])
    query_dep = query_model_dependency(query_class)

    @router.get("/", response_model=PageData[view_class])
    async def page(
        db: Annotated[AsyncSession, Depends(get_db)],
        query: Annotated[BaseModel, Depends(query_dep)],
        page: Annotated[int, Query(ge=1)] = 1,
        size: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
        sort: Annotated[list[str] | None, Query()] = None,
    ) -> Any:
        """조건에 맞는 레코드를 페이지 단위로 조회합니다 (Paged listing)."""
        return await service.page(db, query, PageQuery(page=page, size=size, sort=sort or []))

    @router.get("/list", response_model=list[view_class])
    async def list_all(
        db: Annotated[AsyncSession, Depends(get_db)],
        query: Annotated[BaseModel, Depends(query_dep)],
        sort: Annotated[list[str] | None, Query()] = None,
    ) -> Any:
        """조건에 맞는 모든 레코드를 정렬하여 조회합니다 (Sorted listing, unpaged)."""
        return await service.list(db, query, SortQuery(sort=sort or []))

    @router.get("/export")
    async def export(
        db: Annotated[AsyncSession, Depends(get_db)],
        query: Annotated[BaseModel, Depends(query_dep)],
        sort: Annotated[list[str] | None, Query()] = None,
    ) -> StreamingResponse:
        """조건에 맞는 레코드를 Excel 파일로 내보냅니다 (Excel export)."""
        buffer = BytesIO()
        await service.export(db, query, SortQuery(sort=sort or []), buffer)
        buffer.seek(0)
        filename: str = f"{export_filename}_{datetime.now().strftime('%Y%m%d%H%M%S')}.xlsx"
        return StreamingResponse(
            buffer,
            media_type=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @router.get("/{record_id}", response_model=detail_class)
    async def get(
        record_id: int,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> Any:
        """상세 정보를 조회합니다 (Detail by id; 404 when absent)."""
        return await service.get(db, record_id)

    @router.post("/", response_model=IdResponse, status_code=201)
    async def create(
        data: request_class,
        db: Annotated[AsyncSession, Depends(get_db)],
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> IdResponse:
        """새 레코드를 생성합니다 (Create; returns the new id)."""
        new_id: int = await service.create(db, data, operator_id=current_user.id)
        return IdResponse(id=new_id)

    @router.put("/{record_id}", response_model=MessageResponse)
    async def update(
        record_id: int,
        data: request_class,
        db: Annotated[AsyncSession, Depends(get_db)],
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> MessageResponse:
        """레코드를 수정합니다 (Update; the path id wins over any body id)."""
        data.id = record_id
        await service.update(db, data, operator_id=current_user.id)
        return MessageResponse(message="Updated")

    @router.delete("/{ids}", status_code=204)
    async def delete(
        ids: str,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> None:
        """쉼표로 구분된 ID의 레코드를 삭제합니다 (Bulk delete, e.g. /1,2,3)."""
        await service.delete(db, parse_ids(ids))

    return router
