"""추천서 요청 서비스 — 추천서 요청 CRUD 비즈니스 로직.

RecommendationRequest Service — List, create, get, full-replacement
update and delete of recommendation requests.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.recommendation import RecommendationRequest
from app.repositories.recommendation_request_repository import (
    recommendation_request_repository,
)
from app.schemas.common import MessageResponse
from app.schemas.recommendation_request import (
    RecommendationRequestCreate,
    RecommendationRequestResponse,
    RecommendationRequestUpdate,
)
from app.utils.exceptions import EntityNotFoundError


class RecommendationRequestService:
    """추천서 요청 관련 비즈니스 로직을 처리하는 서비스."""

    async def _get_or_raise(self, db: AsyncSession, request_id: int) -> RecommendationRequest:
        request: RecommendationRequest | None = await recommendation_request_repository.get_by_id(
            db, request_id
        )
        if request is None:
            raise EntityNotFoundError(RecommendationRequest, request_id)
        return request

    async def list_requests(self, db: AsyncSession) -> list[RecommendationRequestResponse]:
        """전체 추천서 요청 목록을 조회합니다."""
        requests = await recommendation_request_repository.get_all(db)
        return [RecommendationRequestResponse.model_validate(r) for r in requests]

    async def create_request(
        self,
        db: AsyncSession,
        data: RecommendationRequestCreate,
    ) -> RecommendationRequestResponse:
        """새 추천서 요청을 생성합니다.

        Create a recommendation request from the submitted fields.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 요청 생성 데이터 (Request fields)

        Returns:
            RecommendationRequestResponse: 저장된 요청 (Persisted request)
        """
        request: RecommendationRequest = await recommendation_request_repository.create(
            db, data.model_dump()
        )
        return RecommendationRequestResponse.model_validate(request)

    async def get_request(self, db: AsyncSession, request_id: int) -> RecommendationRequestResponse:
        """ID로 추천서 요청을 조회합니다.

        Raises:
            EntityNotFoundError: 요청이 없을 때 (No request with this id)
        """
        return RecommendationRequestResponse.model_validate(await self._get_or_raise(db, request_id))

    async def update_request(
        self,
        db: AsyncSession,
        request_id: int,
        data: RecommendationRequestUpdate,
    ) -> RecommendationRequestResponse:
        """추천서 요청의 모든 필드를 교체합니다.

        Overwrite every field of an existing request with the request body.

        Raises:
            EntityNotFoundError: 요청이 없을 때, 저장소는 변경되지 않음
                                 (No request with this id; nothing is written)
        """
        request: RecommendationRequest = await self._get_or_raise(db, request_id)
        request = await recommendation_request_repository.update(
            db, request, data.model_dump(exclude={"id"})
        )
        return RecommendationRequestResponse.model_validate(request)

    async def delete_request(self, db: AsyncSession, request_id: int) -> MessageResponse:
        """추천서 요청을 삭제합니다.

        Raises:
            EntityNotFoundError: 요청이 없을 때 (No request with this id)
        """
        request: RecommendationRequest = await self._get_or_raise(db, request_id)
        await recommendation_request_repository.delete(db, request)
        return MessageResponse(message=f"RecommendationRequest with id {request_id} deleted")


# 싱글턴 인스턴스 — Singleton instance
recommendation_request_service: RecommendationRequestService = RecommendationRequestService()
