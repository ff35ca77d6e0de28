"""메뉴 리뷰 API 테스트 — 목록, 등록, 조회, 수정, 삭제 및 권한.

MenuItemReview API tests — list, create, get, update, delete and the
capability checks guarding each endpoint.
"""

from datetime import datetime

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.dining import MenuItemReview
from tests.conftest import auth_header

BASE = "/api/menuitemreview"

NEW_REVIEW = {
    "itemId": 99,
    "reviewerEmail": "admin@ucsb.edu",
    "stars": 5,
    "dateReviewed": "2025-10-25T20:15:00",
    "comments": "Perfect!",
}


async def _seed_reviews(db: AsyncSession) -> list[MenuItemReview]:
    reviews = [
        MenuItemReview(
            item_id=1, reviewer_email="a@ucsb.edu", stars=4,
            date_reviewed=datetime(2025, 1, 2, 12, 0, 0), comments="Tasty",
        ),
        MenuItemReview(
            item_id=2, reviewer_email="b@ucsb.edu", stars=1,
            date_reviewed=datetime(2025, 3, 4, 18, 30, 0), comments="Cold",
        ),
    ]
    db.add_all(reviews)
    await db.flush()
    for r in reviews:
        await db.refresh(r)
    return reviews


# ===== 권한 (Capabilities) =====

class TestMenuItemReviewAccess:
    """로그인/관리자 권한 검사."""

    async def test_logged_out_list_forbidden(self, client: AsyncClient):
        """로그아웃 상태 목록 조회 → 403."""
        res = await client.get(f"{BASE}/all")
        assert res.status_code == 403

    async def test_logged_out_get_forbidden(self, client: AsyncClient):
        res = await client.get(BASE, params={"id": 1})
        assert res.status_code == 403

    async def test_logged_out_post_forbidden(self, client: AsyncClient):
        res = await client.post(f"{BASE}/post", params=NEW_REVIEW)
        assert res.status_code == 403

    async def test_regular_user_post_forbidden(self, client: AsyncClient, user_token):
        """일반 사용자는 등록 불가."""
        res = await client.post(f"{BASE}/post", params=NEW_REVIEW, headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_regular_user_post_without_params_forbidden(self, client: AsyncClient, user_token):
        """권한 검사는 파라미터 검증보다 먼저 수행."""
        res = await client.post(f"{BASE}/post", headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_regular_user_put_forbidden(self, client: AsyncClient, db, user_token):
        reviews = await _seed_reviews(db)
        res = await client.put(
            BASE, params={"id": reviews[0].id}, json=NEW_REVIEW, headers=auth_header(user_token),
        )
        assert res.status_code == 403

    async def test_regular_user_delete_forbidden(self, client: AsyncClient, db, user_token):
        reviews = await _seed_reviews(db)
        res = await client.delete(BASE, params={"id": reviews[0].id}, headers=auth_header(user_token))
        assert res.status_code == 403

        still = await client.get(BASE, params={"id": reviews[0].id}, headers=auth_header(user_token))
        assert still.status_code == 200

    async def test_invalid_token_unauthorized(self, client: AsyncClient):
        res = await client.get(f"{BASE}/all", headers=auth_header("not-a-jwt"))
        assert res.status_code == 401


# ===== 목록 (List) =====

class TestListMenuItemReviews:
    """목록 조회 테스트."""

    async def test_list_empty(self, client: AsyncClient, user_token):
        res = await client.get(f"{BASE}/all", headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json() == []

    async def test_list_returns_stored_reviews(self, client: AsyncClient, db, user_token):
        """저장된 모든 리뷰를 camelCase로 반환."""
        reviews = await _seed_reviews(db)
        res = await client.get(f"{BASE}/all", headers=auth_header(user_token))
        assert res.status_code == 200
        data = res.json()
        assert [r["id"] for r in data] == [r.id for r in reviews]
        assert data[0] == {
            "id": reviews[0].id,
            "itemId": 1,
            "reviewerEmail": "a@ucsb.edu",
            "stars": 4,
            "dateReviewed": "2025-01-02T12:00:00",
            "comments": "Tasty",
        }


# ===== 등록 (Create) =====

class TestCreateMenuItemReview:
    """등록 테스트."""

    async def test_admin_create(self, client: AsyncClient, admin_token):
        """관리자 등록 → 모든 필드 + 생성된 id 반환."""
        res = await client.post(f"{BASE}/post", params=NEW_REVIEW, headers=auth_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert isinstance(data["id"], int)
        assert {k: v for k, v in data.items() if k != "id"} == NEW_REVIEW

    async def test_created_review_is_listed(self, client: AsyncClient, admin_token):
        created = await client.post(f"{BASE}/post", params=NEW_REVIEW, headers=auth_header(admin_token))
        res = await client.get(f"{BASE}/all", headers=auth_header(admin_token))
        assert res.json() == [created.json()]

    async def test_create_missing_param(self, client: AsyncClient, admin_token):
        params = {k: v for k, v in NEW_REVIEW.items() if k != "stars"}
        res = await client.post(f"{BASE}/post", params=params, headers=auth_header(admin_token))
        assert res.status_code == 422

    async def test_create_bad_date(self, client: AsyncClient, admin_token):
        params = {**NEW_REVIEW, "dateReviewed": "yesterday"}
        res = await client.post(f"{BASE}/post", params=params, headers=auth_header(admin_token))
        assert res.status_code == 422

    async def test_admin_emails_grant_admin(self, client: AsyncClient, monkeypatch, user_token):
        """ADMIN_EMAILS에 포함된 사용자는 관리자 권한."""
        from app.config import settings
        monkeypatch.setattr(settings, "ADMIN_EMAILS", ["USER@ucsb.edu"])
        res = await client.post(f"{BASE}/post", params=NEW_REVIEW, headers=auth_header(user_token))
        assert res.status_code == 200


# ===== 상세 조회 (Get) =====

class TestGetMenuItemReview:
    """상세 조회 테스트."""

    async def test_get_existing(self, client: AsyncClient, db, user_token):
        reviews = await _seed_reviews(db)
        res = await client.get(BASE, params={"id": reviews[1].id}, headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json()["comments"] == "Cold"
        assert res.json()["dateReviewed"] == "2025-03-04T18:30:00"

    async def test_get_missing(self, client: AsyncClient, user_token):
        """없는 id → 404 + 구조화된 오류."""
        res = await client.get(BASE, params={"id": 7}, headers=auth_header(user_token))
        assert res.status_code == 404
        assert res.json() == {
            "type": "EntityNotFoundException",
            "message": "MenuItemReview with id 7 not found",
        }

    async def test_get_non_integer_id(self, client: AsyncClient, user_token):
        res = await client.get(BASE, params={"id": "abc"}, headers=auth_header(user_token))
        assert res.status_code == 422


# ===== 수정 (Update) =====

class TestUpdateMenuItemReview:
    """전체 교체 수정 테스트."""

    async def test_update_replaces_all_fields(self, client: AsyncClient, db, admin_token):
        reviews = await _seed_reviews(db)
        body = {
            "id": 9999,
            "itemId": 42,
            "reviewerEmail": "c@ucsb.edu",
            "stars": 3,
            "dateReviewed": "2025-06-07T08:09:10",
            "comments": "Fine",
        }
        res = await client.put(
            BASE, params={"id": reviews[0].id}, json=body, headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        # body의 id는 무시
        assert res.json() == {**body, "id": reviews[0].id}

        fetched = await client.get(BASE, params={"id": reviews[0].id}, headers=auth_header(admin_token))
        assert fetched.json() == res.json()

    async def test_update_missing_does_not_write(self, client: AsyncClient, db, admin_token):
        """없는 id 수정 → 404, 저장소 변경 없음."""
        await _seed_reviews(db)
        before = await client.get(f"{BASE}/all", headers=auth_header(admin_token))

        res = await client.put(BASE, params={"id": 67}, json=NEW_REVIEW, headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "MenuItemReview with id 67 not found"

        after = await client.get(f"{BASE}/all", headers=auth_header(admin_token))
        assert after.json() == before.json()

    async def test_update_partial_body_rejected(self, client: AsyncClient, db, admin_token):
        """부분 body는 허용하지 않음 (PATCH 아님)."""
        reviews = await _seed_reviews(db)
        res = await client.put(
            BASE, params={"id": reviews[0].id}, json={"stars": 2}, headers=auth_header(admin_token),
        )
        assert res.status_code == 422


# ===== 삭제 (Delete) =====

class TestDeleteMenuItemReview:
    """삭제 테스트."""

    async def test_delete_existing(self, client: AsyncClient, db, admin_token):
        reviews = await _seed_reviews(db)
        res = await client.delete(BASE, params={"id": reviews[0].id}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"message": f"MenuItemReview with id {reviews[0].id} deleted"}

        gone = await client.get(BASE, params={"id": reviews[0].id}, headers=auth_header(admin_token))
        assert gone.status_code == 404

        remaining = await client.get(f"{BASE}/all", headers=auth_header(admin_token))
        assert [r["id"] for r in remaining.json()] == [reviews[1].id]

    async def test_delete_missing(self, client: AsyncClient, admin_token):
        res = await client.delete(BASE, params={"id": 15}, headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json() == {
            "type": "EntityNotFoundException",
            "message": "MenuItemReview with id 15 not found",
        }


# ===== 일시 및 ID 범위 (Timestamps and id range) =====

class TestMenuItemReviewStorageTypes:
    """시간대 오프셋과 64비트 ID 처리."""

    async def test_offset_timestamp_stored_as_local(self, client: AsyncClient, monkeypatch, admin_token):
        """오프셋이 있는 일시는 벽시계 시각으로 저장."""
        from app.repositories.menu_item_review_repository import menu_item_review_repository

        seen: dict = {}
        original_create = menu_item_review_repository.create

        async def recording_create(db, obj_data):
            seen.update(obj_data)
            return await original_create(db, obj_data)

        monkeypatch.setattr(menu_item_review_repository, "create", recording_create)

        params = {**NEW_REVIEW, "dateReviewed": "2025-10-25T20:15:00+05:00"}
        res = await client.post(f"{BASE}/post", params=params, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["dateReviewed"] == "2025-10-25T20:15:00"
        assert seen["date_reviewed"].tzinfo is None

    async def test_update_offset_timestamp(self, client: AsyncClient, db, admin_token):
        reviews = await _seed_reviews(db)
        body = {**NEW_REVIEW, "dateReviewed": "2025-06-07T08:09:10Z"}
        res = await client.put(BASE, params={"id": reviews[0].id}, json=body, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json()["dateReviewed"] == "2025-06-07T08:09:10"

    async def test_get_beyond_int32_id(self, client: AsyncClient, user_token):
        """32비트 범위를 넘는 id도 404 envelope."""
        res = await client.get(BASE, params={"id": 3000000000}, headers=auth_header(user_token))
        assert res.status_code == 404
        assert res.json() == {
            "type": "EntityNotFoundException",
            "message": "MenuItemReview with id 3000000000 not found",
        }

    def test_ids_are_bigint_on_postgresql(self):
        from sqlalchemy.dialects import postgresql

        from app.models.dining import UCSBDiningCommonsMenuItem
        from app.models.recommendation import RecommendationRequest

        dialect = postgresql.dialect()
        for model in (MenuItemReview, UCSBDiningCommonsMenuItem, RecommendationRequest):
            assert model.__table__.c.id.type.compile(dialect=dialect) == "BIGINT"
