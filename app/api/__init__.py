"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every resource router into a single
router mounted under /api by the FastAPI application.

Included routers:
    - auth: 로그인/토큰/프로필 (Login, tokens, profile)
    - users: 사용자 목록, 관리자 전용 (User listing, admin only)
    - menu_item_reviews: 메뉴 리뷰 CRUD (Menu item reviews)
    - dining_commons_menu_items: 메뉴 항목 목록/등록/조회 (Menu items, no update/delete)
    - recommendation_requests: 추천서 요청 CRUD (Recommendation requests)
    - organizations: 학생 단체 CRUD (UCSB organizations)
"""

from fastapi import APIRouter

from app.api.auth import router as auth_router
from app.api.users import router as users_router
from app.api.menu_item_reviews import router as menu_item_reviews_router
from app.api.dining_commons_menu_items import router as dining_commons_menu_items_router
from app.api.recommendation_requests import router as recommendation_requests_router
from app.api.organizations import router as organizations_router

api_router: APIRouter = APIRouter()

# ---------------------------------------------------------------------------
# 인증 및 사용자 — Auth and users
# ---------------------------------------------------------------------------
api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(users_router, prefix="/admin/users", tags=["Users"])

# ---------------------------------------------------------------------------
# 엔티티 리소스 — Entity resources (경로는 기존 클라이언트와 호환)
# ---------------------------------------------------------------------------
api_router.include_router(menu_item_reviews_router, prefix="/menuitemreview", tags=["Menu Item Reviews"])
api_router.include_router(dining_commons_menu_items_router, prefix="/ucsbdiningcommonsmenuitem", tags=["UCSBDiningCommonsMenuItem"])
api_router.include_router(recommendation_requests_router, prefix="/recommendationrequests", tags=["Recommendation Requests"])
api_router.include_router(organizations_router, prefix="/UCSBOrganization", tags=["UCSBOrganization"])
