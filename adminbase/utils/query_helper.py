"""쿼리 조건 빌더 — 조회 모델 필드를 SQLAlchemy 조건식으로 변환.

Query condition builder.
Translates the fields of a query (filter) model into SQLAlchemy WHERE
predicates against an ORM model. Conditions are declared on the query
model with ``Annotated`` metadata; a field without metadata is compared
for equality against the column of the same name.

Usage:
    class DeptQuery(BaseModel):
        name: Annotated[str | None, QueryCondition(QueryType.INNER_LIKE)] = None
        status: int | None = None

    conditions = build_conditions(DeptQuery(name="dev"), Dept)
    select(Dept).where(*conditions)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel
from sqlalchemy import ColumnElement, inspect

from adminbase.utils.exceptions import BadRequestError


class QueryType(str, Enum):
    """조건 유형 (Condition operator applied to a column)."""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    BETWEEN = "between"
    # '%값%' / '%값' / '값%'
    INNER_LIKE = "inner_like"
    LEFT_LIKE = "left_like"
    RIGHT_LIKE = "right_like"
    IN = "in"
    NOT_IN = "not_in"
    IS_NULL = "is_null"
    NOT_NULL = "not_null"


@dataclass(frozen=True)
class QueryCondition:
    """조회 필드에 붙이는 조건 메타데이터.

    Condition metadata attached to a query model field.

    Attributes:
        type: 조건 유형 (Operator, default EQUAL)
        column: 대상 컬럼 이름, None이면 필드 이름 사용
                (Target column name; defaults to the field name)
    """

    type: QueryType = QueryType.EQUAL
    column: str | None = None


_DEFAULT_CONDITION = QueryCondition()


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, set)):
        return len(value) == 0
    return False


def _predicate(column: Any, condition: QueryCondition, value: Any, field_name: str) -> ColumnElement[bool]:
    query_type: QueryType = condition.type
    if query_type is QueryType.EQUAL:
        return column == value
    if query_type is QueryType.NOT_EQUAL:
        return column != value
    if query_type is QueryType.GREATER_THAN:
        return column > value
    if query_type is QueryType.LESS_THAN:
        return column < value
    if query_type is QueryType.GREATER_THAN_OR_EQUAL:
        return column >= value
    if query_type is QueryType.LESS_THAN_OR_EQUAL:
        return column <= value
    if query_type is QueryType.BETWEEN:
        values = list(value) if isinstance(value, (list, tuple)) else []
        if len(values) != 2:
            raise BadRequestError(f"Query field [{field_name}] requires exactly two values for BETWEEN")
        return column.between(values[0], values[1])
    # 값의 % _ 는 와일드카드가 아닌 문자로 취급 (Wildcards in the value match literally)
    if query_type is QueryType.INNER_LIKE:
        return column.contains(str(value), autoescape=True)
    if query_type is QueryType.LEFT_LIKE:
        return column.endswith(str(value), autoescape=True)
    if query_type is QueryType.RIGHT_LIKE:
        return column.startswith(str(value), autoescape=True)
    if query_type is QueryType.IN:
        return column.in_(list(value))
    if query_type is QueryType.NOT_IN:
        return column.not_in(list(value))
    if query_type is QueryType.IS_NULL:
        return column.is_(None)
    # NOT_NULL
    return column.is_not(None)


def build_conditions(query: BaseModel | None, model: type) -> list[ColumnElement[bool]]:
    """조회 모델을 WHERE 조건 목록으로 변환합니다.

    Build the list of WHERE predicates for ``query`` against ``model``.
    Blank values (None, empty string, empty list) are skipped, so an
    empty query yields no conditions.

    Args:
        query: 조회 조건 모델, None 허용 (Query model instance, may be None)
        model: 대상 ORM 모델 클래스 (Target ORM model class)

    Returns:
        list[ColumnElement[bool]]: 조건식 목록 (Predicates to pass to ``where``)

    Raises:
        BadRequestError: 모델에 없는 컬럼을 참조할 때 (Field references an unknown column)
    """
    if query is None:
        return []

    columns = inspect(model).columns
    conditions: list[ColumnElement[bool]] = []
    for field_name, field_info in type(query).model_fields.items():
        value: Any = getattr(query, field_name)
        if _is_blank(value):
            continue

        condition: QueryCondition = next(
            (meta for meta in field_info.metadata if isinstance(meta, QueryCondition)),
            _DEFAULT_CONDITION,
        )
        # IS_NULL/NOT_NULL은 플래그 값이 참일 때만 적용 (Flag fields apply only when true)
        if condition.type in (QueryType.IS_NULL, QueryType.NOT_NULL) and not value:
            continue
        column_name: str = condition.column or field_name
        if column_name not in columns:
            raise BadRequestError(f"Unknown query column [{column_name}]")

        conditions.append(_predicate(getattr(model, column_name), condition, value, field_name))
    return conditions
