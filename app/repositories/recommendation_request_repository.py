"""추천서 요청 레포지토리 — 추천서 요청 CRUD 쿼리.

RecommendationRequest Repository — CRUD queries for the recommendation_requests table.
Inherits generic CRUD from BaseRepository.
"""

from app.models.recommendation import RecommendationRequest
from app.repositories.base import BaseRepository


class RecommendationRequestRepository(BaseRepository[RecommendationRequest]):
    """recommendation_requests 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the recommendation_requests table.
    """

    def __init__(self) -> None:
        super().__init__(RecommendationRequest)


# 싱글턴 인스턴스 — Singleton instance
recommendation_request_repository: RecommendationRequestRepository = RecommendationRequestRepository()
