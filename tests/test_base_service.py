"""기본 CRUD 서비스 테스트 (실제 SQLite DB).

BaseService tests run through the department and announcement services:
paging, sorting, filtering, detail lookup, create/update/delete semantics,
audit display names, transaction rollback and export.
"""

from io import BytesIO

import pytest
from openpyxl import load_workbook
from sqlalchemy.ext.asyncio import AsyncSession

from adminbase.models.dept import Dept
from adminbase.models.user import User
from adminbase.repositories.dept_repository import dept_repository
from adminbase.schemas.dept import DeptQuery, DeptRequest
from adminbase.schemas.query import PageQuery, SortQuery
from adminbase.services.dept_service import dept_service
from adminbase.utils.exceptions import BadRequestError, NotFoundError


async def add_dept(db: AsyncSession, name: str, sort: int = 999, **kwargs) -> int:
    dept = Dept(name=name, sort=sort, **kwargs)
    db.add(dept)
    await db.commit()
    return dept.id


class TestGet:
    """상세 조회."""

    async def test_missing_id_not_found(self, db: AsyncSession):
        """없는 ID 조회 시 404, 메시지에 ID 포함."""
        with pytest.raises(NotFoundError) as exc_info:
            await dept_service.get(db, 4242)
        assert exc_info.value.status_code == 404
        assert "[4242]" in exc_info.value.detail

    async def test_create_then_get_round_trip(self, db: AsyncSession, admin_user: User):
        """생성 후 조회 시 모든 필드 일치, 생성자 이름 채움."""
        admin_id = admin_user.id
        new_id = await dept_service.create(db, DeptRequest(
            name="Engineering", parent_id=0, description="Builds things", sort=3, status=1,
        ), operator_id=admin_id)
        assert new_id > 0

        detail = await dept_service.get(db, new_id)
        assert detail.id == new_id
        assert detail.name == "Engineering"
        assert detail.parent_id == 0
        assert detail.description == "Builds things"
        assert detail.sort == 3
        assert detail.status == 1
        assert detail.create_user == admin_id
        assert detail.create_user_string == "Test Admin"
        assert detail.update_user_string is None

    async def test_missing_audit_user_leaves_name_unset(self, db: AsyncSession):
        """감사 사용자 조회 실패 시 이름만 비고 나머지는 채워짐."""
        dept_id = await add_dept(db, "Orphaned", create_user=987654)

        detail = await dept_service.get(db, dept_id)
        assert detail.create_user_string is None
        assert detail.name == "Orphaned"

        views = await dept_service.list(db, None, None)
        assert views[0].create_user_string is None
        assert views[0].name == "Orphaned"


class TestCreate:
    """생성."""

    async def test_none_request_returns_zero(self, db: AsyncSession):
        assert await dept_service.create(db, None) == 0

    async def test_empty_request_returns_zero(self, db: AsyncSession):
        """필드가 없는 요청은 저장하지 않고 0 반환."""
        assert await dept_service.create(db, DeptRequest()) == 0
        assert await dept_service.list(db, None, None) == []

    async def test_defaults_applied(self, db: AsyncSession):
        """요청에 없는 필드는 엔티티 기본값 사용."""
        new_id = await dept_service.create(db, DeptRequest(name="Sales"))
        detail = await dept_service.get(db, new_id)
        assert detail.parent_id == 0
        assert detail.sort == 999
        assert detail.status == 1

    async def test_request_id_ignored(self, db: AsyncSession):
        """요청의 id는 생성에 사용되지 않음."""
        new_id = await dept_service.create(db, DeptRequest(id=500, name="Sales"))
        assert new_id != 500

    async def test_failed_insert_rolls_back(self, db: AsyncSession, monkeypatch):
        """삽입 후 실패하면 롤백되어 행이 남지 않음."""
        original = dept_repository.create

        async def failing_create(session, data):
            await original(session, data)
            raise RuntimeError("insert failed")

        monkeypatch.setattr(dept_repository, "create", failing_create)
        with pytest.raises(RuntimeError):
            await dept_service.create(db, DeptRequest(name="Ghost"))
        monkeypatch.undo()

        assert await dept_service.list(db, DeptQuery(name="Ghost"), None) == []


class TestUpdate:
    """수정."""

    async def test_partial_update(self, db: AsyncSession, admin_user: User):
        """요청에 있는 필드만 변경, 나머지는 유지."""
        admin_id = admin_user.id
        dept_id = await add_dept(db, "Engineering", sort=1, description="Original")

        await dept_service.update(db, DeptRequest(id=dept_id, sort=5), operator_id=admin_id)

        detail = await dept_service.get(db, dept_id)
        assert detail.sort == 5
        assert detail.name == "Engineering"
        assert detail.description == "Original"
        assert detail.update_user == admin_id
        assert detail.update_user_string == "Test Admin"
        assert detail.update_time is not None

    async def test_explicit_null_clears_field(self, db: AsyncSession):
        """명시적으로 None을 보낸 필드는 비워짐."""
        dept_id = await add_dept(db, "Engineering", description="Original")
        await dept_service.update(db, DeptRequest(id=dept_id, description=None))
        assert (await dept_service.get(db, dept_id)).description is None

    async def test_update_without_id(self, db: AsyncSession):
        with pytest.raises(BadRequestError):
            await dept_service.update(db, DeptRequest(name="Nope"))

    async def test_update_missing_record_is_noop(self, db: AsyncSession):
        """없는 레코드 수정은 아무 것도 하지 않음."""
        await dept_service.update(db, DeptRequest(id=777, name="Phantom"))
        assert await dept_service.list(db, None, None) == []


class TestDelete:
    """삭제."""

    async def test_deletes_exactly_given_ids(self, db: AsyncSession):
        a = await add_dept(db, "A")
        b = await add_dept(db, "B")
        c = await add_dept(db, "C")

        await dept_service.delete(db, [a, b])

        remaining = await dept_service.list(db, None, None)
        assert [v.id for v in remaining] == [c]

    async def test_missing_ids_ignored(self, db: AsyncSession):
        a = await add_dept(db, "A")
        await dept_service.delete(db, [a, 9999])
        assert await dept_service.list(db, None, None) == []

    async def test_failed_delete_rolls_back(self, db: AsyncSession, monkeypatch):
        a = await add_dept(db, "A")
        original = dept_repository.delete_by_ids

        async def failing_delete(session, ids):
            await original(session, ids)
            raise RuntimeError("delete failed")

        monkeypatch.setattr(dept_repository, "delete_by_ids", failing_delete)
        with pytest.raises(RuntimeError):
            await dept_service.delete(db, [a])
        monkeypatch.undo()

        assert (await dept_service.get(db, a)).name == "A"


class TestListAndPage:
    """목록/페이지 조회."""

    async def test_filter_no_match_returns_empty_list(self, db: AsyncSession):
        await add_dept(db, "Engineering")
        result = await dept_service.list(db, DeptQuery(name="Marketing"), SortQuery())
        assert result == []

    async def test_default_order_is_id(self, db: AsyncSession):
        ids = [await add_dept(db, name) for name in ("C", "A", "B")]
        views = await dept_service.list(db, None, None)
        assert [v.id for v in views] == ids

    async def test_camel_case_sort(self, db: AsyncSession):
        """camelCase 정렬 필드를 snake_case 컬럼으로 변환."""
        await add_dept(db, "Root", parent_id=0)
        await add_dept(db, "Child", parent_id=5)
        views = await dept_service.list(db, None, SortQuery(sort=["parentId,desc"]))
        assert [v.name for v in views] == ["Child", "Root"]

    async def test_sort_create_time_desc(self, db: AsyncSession):
        first = await add_dept(db, "First")
        second = await add_dept(db, "Second")
        views = await dept_service.list(db, None, SortQuery(sort=["createTime,desc", "id,desc"]))
        assert [v.id for v in views] == [second, first]

    async def test_unknown_sort_column(self, db: AsyncSession):
        with pytest.raises(BadRequestError):
            await dept_service.list(db, None, SortQuery(sort=["salary,asc"]))

    async def test_page(self, db: AsyncSession):
        for i in range(5):
            await add_dept(db, f"Dept {i}", sort=i)

        result = await dept_service.page(db, None, PageQuery(page=2, size=2, sort=["sort,asc"]))
        assert result.total == 5
        assert [v.name for v in result.list] == ["Dept 2", "Dept 3"]

    async def test_page_with_filter(self, db: AsyncSession):
        await add_dept(db, "Engineering", status=1)
        await add_dept(db, "Legacy", status=2)
        result = await dept_service.page(db, DeptQuery(status=2), PageQuery())
        assert result.total == 1
        assert result.list[0].name == "Legacy"

    async def test_page_past_end(self, db: AsyncSession):
        await add_dept(db, "Only")
        result = await dept_service.page(db, None, PageQuery(page=3, size=10))
        assert result.total == 1
        assert result.list == []


class TestExport:
    """내보내기."""

    async def test_export_writes_detail_rows(self, db: AsyncSession, admin_user: User):
        admin_id = admin_user.id
        await add_dept(db, "Engineering", sort=1, create_user=admin_id)
        await add_dept(db, "Sales", sort=2)
        await add_dept(db, "Legacy", sort=3, status=2)

        buffer = BytesIO()
        await dept_service.export(db, DeptQuery(status=1), SortQuery(sort=["sort,desc"]), buffer)
        buffer.seek(0)
        ws = load_workbook(buffer).active

        assert ws.title == "Departments"
        assert ws.max_row == 3
        assert ws.cell(row=1, column=6).value == "Name"
        assert ws.cell(row=2, column=6).value == "Sales"
        assert ws.cell(row=3, column=6).value == "Engineering"
        assert ws.cell(row=3, column=2).value == "Test Admin"
