"""학생 단체 API 테스트 — org code를 식별자로 사용하는 CRUD.

UCSBOrganization API tests. The id query parameter carries the org code.
"""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.organization import UCSBOrganization
from tests.conftest import auth_header

BASE = "/api/UCSBOrganization"

NEW_ORG = {
    "orgCode": "ZPR",
    "orgTranslationShort": "ZETA PHI RHO",
    "orgTranslation": "ZETA PHI RHO",
    "inactive": False,
}


async def _seed_orgs(db: AsyncSession) -> list[UCSBOrganization]:
    orgs = [
        UCSBOrganization(org_code="SKY", org_translation_short="SKYDIVING CLUB",
                         org_translation="SKYDIVING CLUB AT UCSB", inactive=False),
        UCSBOrganization(org_code="OSLI", org_translation_short="STUDENT LIFE",
                         org_translation="OFFICE OF STUDENT LIFE", inactive=True),
    ]
    db.add_all(orgs)
    await db.flush()
    return orgs


class TestOrganizationAccess:
    """권한 검사."""

    async def test_logged_out_get_forbidden(self, client: AsyncClient):
        res = await client.get(BASE, params={"id": "SKY"})
        assert res.status_code == 403

    async def test_regular_user_post_forbidden(self, client: AsyncClient, user_token):
        res = await client.post(f"{BASE}/post", params=NEW_ORG, headers=auth_header(user_token))
        assert res.status_code == 403


class TestOrganizationCrud:
    """CRUD 테스트."""

    async def test_list_ordered_by_code(self, client: AsyncClient, db, user_token):
        await _seed_orgs(db)
        res = await client.get(f"{BASE}/all", headers=auth_header(user_token))
        assert res.status_code == 200
        assert [o["orgCode"] for o in res.json()] == ["OSLI", "SKY"]

    async def test_admin_create(self, client: AsyncClient, admin_token):
        params = {**NEW_ORG, "inactive": "false"}
        res = await client.post(f"{BASE}/post", params=params, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == NEW_ORG

    async def test_create_duplicate_code(self, client: AsyncClient, db, admin_token):
        """이미 존재하는 orgCode → 409."""
        await _seed_orgs(db)
        params = {**NEW_ORG, "orgCode": "SKY", "inactive": "false"}
        res = await client.post(f"{BASE}/post", params=params, headers=auth_header(admin_token))
        assert res.status_code == 409

        kept = await client.get(BASE, params={"id": "SKY"}, headers=auth_header(admin_token))
        assert kept.json()["orgTranslationShort"] == "SKYDIVING CLUB"

    async def test_get_existing(self, client: AsyncClient, db, user_token):
        await _seed_orgs(db)
        res = await client.get(BASE, params={"id": "OSLI"}, headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json() == {
            "orgCode": "OSLI",
            "orgTranslationShort": "STUDENT LIFE",
            "orgTranslation": "OFFICE OF STUDENT LIFE",
            "inactive": True,
        }

    async def test_get_missing(self, client: AsyncClient, user_token):
        res = await client.get(BASE, params={"id": "NOPE"}, headers=auth_header(user_token))
        assert res.status_code == 404
        assert res.json() == {
            "type": "EntityNotFoundException",
            "message": "UCSBOrganization with id NOPE not found",
        }

    async def test_update_keeps_code(self, client: AsyncClient, db, admin_token):
        """body의 orgCode는 무시되고 쿼리 id가 유지."""
        await _seed_orgs(db)
        body = {
            "orgCode": "OTHER",
            "orgTranslationShort": "SKY CLUB",
            "orgTranslation": "SKYDIVING",
            "inactive": True,
        }
        res = await client.put(BASE, params={"id": "SKY"}, json=body, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {**body, "orgCode": "SKY"}

        other = await client.get(BASE, params={"id": "OTHER"}, headers=auth_header(admin_token))
        assert other.status_code == 404

    async def test_update_missing(self, client: AsyncClient, admin_token):
        body = {k: v for k, v in NEW_ORG.items() if k != "orgCode"}
        res = await client.put(BASE, params={"id": "NOPE"}, json=body, headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_delete(self, client: AsyncClient, db, admin_token):
        await _seed_orgs(db)
        res = await client.delete(BASE, params={"id": "SKY"}, headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"message": "UCSBOrganization with id SKY deleted"}

        listed = await client.get(f"{BASE}/all", headers=auth_header(admin_token))
        assert [o["orgCode"] for o in listed.json()] == ["OSLI"]

    async def test_delete_missing(self, client: AsyncClient, admin_token):
        res = await client.delete(BASE, params={"id": "NOPE"}, headers=auth_header(admin_token))
        assert res.status_code == 404
        assert res.json()["message"] == "UCSBOrganization with id NOPE not found"


class TestOrganizationStoreProperties:
    """권한 및 저장소 불변 조건."""

    async def test_logged_out_list_forbidden(self, client: AsyncClient):
        res = await client.get(f"{BASE}/all")
        assert res.status_code == 403

    async def test_list_returns_exact_contents(self, client: AsyncClient, db, user_token):
        await _seed_orgs(db)
        res = await client.get(f"{BASE}/all", headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json() == [
            {
                "orgCode": "OSLI",
                "orgTranslationShort": "STUDENT LIFE",
                "orgTranslation": "OFFICE OF STUDENT LIFE",
                "inactive": True,
            },
            {
                "orgCode": "SKY",
                "orgTranslationShort": "SKYDIVING CLUB",
                "orgTranslation": "SKYDIVING CLUB AT UCSB",
                "inactive": False,
            },
        ]

    async def test_regular_user_put_forbidden(self, client: AsyncClient, db, user_token):
        await _seed_orgs(db)
        before = await client.get(f"{BASE}/all", headers=auth_header(user_token))

        res = await client.put(BASE, params={"id": "SKY"}, json=NEW_ORG, headers=auth_header(user_token))
        assert res.status_code == 403

        after = await client.get(f"{BASE}/all", headers=auth_header(user_token))
        assert after.json() == before.json()

    async def test_regular_user_delete_forbidden(self, client: AsyncClient, db, user_token):
        await _seed_orgs(db)
        res = await client.delete(BASE, params={"id": "SKY"}, headers=auth_header(user_token))
        assert res.status_code == 403

        still = await client.get(BASE, params={"id": "SKY"}, headers=auth_header(user_token))
        assert still.status_code == 200

    async def test_update_missing_does_not_write(self, client: AsyncClient, db, admin_token):
        """없는 org code 수정 → 404, 저장소 변경 없음."""
        await _seed_orgs(db)
        before = await client.get(f"{BASE}/all", headers=auth_header(admin_token))

        body = {**NEW_ORG, "orgCode": "SKY"}
        res = await client.put(BASE, params={"id": "NOPE"}, json=body, headers=auth_header(admin_token))
        assert res.status_code == 404

        after = await client.get(f"{BASE}/all", headers=auth_header(admin_token))
        assert after.json() == before.json()

    async def test_concurrent_duplicate_insert(self, client: AsyncClient, db, monkeypatch, admin_token):
        """중복 검사 이후 다른 요청이 같은 코드를 선점 → 409."""
        from app.repositories.organization_repository import organization_repository

        await _seed_orgs(db)
        await db.commit()
        # 다른 세션이 이미 저장한 것처럼 identity map 비움
        db.expunge_all()

        async def never_exists(db, filters):
            return False

        monkeypatch.setattr(organization_repository, "exists", never_exists)

        params = {**NEW_ORG, "orgCode": "SKY", "inactive": "false"}
        res = await client.post(f"{BASE}/post", params=params, headers=auth_header(admin_token))
        assert res.status_code == 409

        kept = await client.get(BASE, params={"id": "SKY"}, headers=auth_header(admin_token))
        assert kept.status_code == 200
        assert kept.json()["orgTranslation"] == "SKYDIVING CLUB AT UCSB"
