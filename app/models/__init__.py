"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    user: 사용자 (User accounts)
    token: 리프레시 토큰 (Refresh tokens)
    dining: 메뉴 항목 및 리뷰 (Dining commons menu items and reviews)
    recommendation: 추천서 요청 (Recommendation requests)
    organization: 학생 단체 (UCSB student organizations)
"""

from app.models.user import User
from app.models.token import RefreshToken
from app.models.dining import MenuItemReview, UCSBDiningCommonsMenuItem
from app.models.recommendation import RecommendationRequest
from app.models.organization import UCSBOrganization

__all__ = [
    "User", "RefreshToken",
    "MenuItemReview", "UCSBDiningCommonsMenuItem",
    "RecommendationRequest",
    "UCSBOrganization",
]
