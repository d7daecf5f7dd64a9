"""공지사항 CRUD API 테스트.

Announcement CRUD API tests — required fields, effective window validation,
title/type/creation-time filters, detail view and bulk delete.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/admin/announcements/"

NOTICE = {
    "title": "System maintenance",
    "content": "The admin panel is offline Sunday 02:00-04:00.",
    "type": "notice",
    "effective_time": "2026-05-01T00:00:00Z",
    "terminate_time": "2026-05-08T00:00:00Z",
    "sort": 1,
}


async def create_announcement(client: AsyncClient, token: str, **overrides) -> int:
    res = await client.post(URL, json={**NOTICE, **overrides}, headers=auth_header(token))
    assert res.status_code == 201, res.text
    return res.json()["id"]


class TestAnnouncementCreate:
    """공지사항 생성 테스트."""

    async def test_create_and_get(self, client: AsyncClient, admin_token):
        """생성 후 상세 조회 — 본문 포함."""
        new_id = await create_announcement(client, admin_token)
        res = await client.get(f"{URL}{new_id}", headers=auth_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["title"] == NOTICE["title"]
        assert data["content"] == NOTICE["content"]
        assert data["type"] == "notice"
        assert data["effective_time"].startswith("2026-05-01T00:00:00")
        assert data["create_user_string"] == "Test Admin"

    async def test_missing_required_fields(self, client: AsyncClient, admin_token):
        """제목/내용/유형 누락 시 400."""
        res = await client.post(URL, json={"title": "Only a title"}, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_terminate_before_effective(self, client: AsyncClient, admin_token):
        """종료 일시가 시작 일시보다 빠르면 400."""
        res = await client.post(URL, json={
            **NOTICE,
            "effective_time": "2026-05-08T00:00:00Z",
            "terminate_time": "2026-05-01T00:00:00Z",
        }, headers=auth_header(admin_token))
        assert res.status_code == 400


class TestAnnouncementRead:
    """공지사항 조회 테스트."""

    async def test_page_hides_content(self, client: AsyncClient, admin_token):
        """목록 뷰에는 본문이 없음."""
        await create_announcement(client, admin_token)
        res = await client.get(URL, headers=auth_header(admin_token))
        assert res.status_code == 200
        item = res.json()["list"][0]
        assert item["title"] == NOTICE["title"]
        assert "content" not in item

    async def test_filter_by_type_and_title(self, client: AsyncClient, admin_token):
        await create_announcement(client, admin_token)
        await create_announcement(client, admin_token, title="Spring event", type="event")

        res = await client.get(f"{URL}list", params={"type": "event"}, headers=auth_header(admin_token))
        assert [a["title"] for a in res.json()] == ["Spring event"]

        res = await client.get(f"{URL}list", params={"title": "maint"}, headers=auth_header(admin_token))
        assert [a["title"] for a in res.json()] == ["System maintenance"]

    async def test_filter_by_create_time_range(self, client: AsyncClient, admin_token):
        """생성 일시 범위 필터 (반복 파라미터 두 개)."""
        await create_announcement(client, admin_token)

        res = await client.get(f"{URL}list", params=[
            ("create_time", "2000-01-01T00:00:00Z"),
            ("create_time", "2100-01-01T00:00:00Z"),
        ], headers=auth_header(admin_token))
        assert res.status_code == 200
        assert len(res.json()) == 1

        res = await client.get(f"{URL}list", params=[
            ("create_time", "2000-01-01T00:00:00Z"),
            ("create_time", "2000-12-31T00:00:00Z"),
        ], headers=auth_header(admin_token))
        assert res.json() == []

    async def test_create_time_range_needs_two_values(self, client: AsyncClient, admin_token):
        res = await client.get(f"{URL}list", params={"create_time": "2000-01-01T00:00:00Z"},
                               headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_sort_by_create_time_desc(self, client: AsyncClient, admin_token):
        first = await create_announcement(client, admin_token, title="First")
        second = await create_announcement(client, admin_token, title="Second")
        res = await client.get(f"{URL}list", params=[("sort", "createTime,desc"), ("sort", "id,desc")],
                               headers=auth_header(admin_token))
        assert [a["id"] for a in res.json()] == [second, first]


class TestAnnouncementUpdateDelete:
    """공지사항 수정/삭제 테스트."""

    async def test_update_window(self, client: AsyncClient, admin_token):
        new_id = await create_announcement(client, admin_token)
        res = await client.put(f"{URL}{new_id}", json={"terminate_time": "2026-06-01T00:00:00Z"},
                               headers=auth_header(admin_token))
        assert res.status_code == 200

        data = (await client.get(f"{URL}{new_id}", headers=auth_header(admin_token))).json()
        assert data["terminate_time"].startswith("2026-06-01T00:00:00")
        assert data["title"] == NOTICE["title"]

    async def test_update_invalid_window(self, client: AsyncClient, admin_token):
        new_id = await create_announcement(client, admin_token)
        res = await client.put(f"{URL}{new_id}", json={
            "effective_time": "2026-07-01T00:00:00Z",
            "terminate_time": "2026-06-01T00:00:00Z",
        }, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_update_terminate_before_stored_effective(self, client: AsyncClient, admin_token):
        """저장된 시작 일시보다 이른 종료 일시만 보내도 400."""
        new_id = await create_announcement(client, admin_token, effective_time="2026-07-01T00:00:00Z",
                                           terminate_time="2026-07-08T00:00:00Z")
        res = await client.put(f"{URL}{new_id}", json={"terminate_time": "2026-06-01T00:00:00Z"},
                               headers=auth_header(admin_token))
        assert res.status_code == 400

        data = (await client.get(f"{URL}{new_id}", headers=auth_header(admin_token))).json()
        assert data["terminate_time"].startswith("2026-07-08T00:00:00")

    async def test_update_null_title(self, client: AsyncClient, admin_token):
        """필수 컬럼에 null을 보내면 400, 기존 값 유지."""
        new_id = await create_announcement(client, admin_token)
        res = await client.put(f"{URL}{new_id}", json={"title": None}, headers=auth_header(admin_token))
        assert res.status_code == 400

        data = (await client.get(f"{URL}{new_id}", headers=auth_header(admin_token))).json()
        assert data["title"] == NOTICE["title"]

    async def test_delete(self, client: AsyncClient, admin_token):
        new_id = await create_announcement(client, admin_token)
        res = await client.delete(f"{URL}{new_id}", headers=auth_header(admin_token))
        assert res.status_code == 204

        res = await client.get(f"{URL}{new_id}", headers=auth_header(admin_token))
        assert res.status_code == 404
