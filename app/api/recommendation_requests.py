"""추천서 요청 라우터 — 추천서 요청 CRUD 엔드포인트.

Recommendation Request Router — CRUD endpoints under /api/recommendationrequests.

Permission Matrix (역할별 권한 설계):
    - 목록/상세 조회: 로그인 사용자 (user)
    - 등록/수정/삭제: 관리자만 (admin)
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin, require_user
from app.database import get_db
from app.models.user import User
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.recommendation_request import (
    RecommendationRequestCreate,
    RecommendationRequestResponse,
    RecommendationRequestUpdate,
)
from app.services.recommendation_request_service import recommendation_request_service

router: APIRouter = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("/all", response_model=list[RecommendationRequestResponse])
async def list_recommendation_requests(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> list[RecommendationRequestResponse]:
    """전체 추천서 요청 목록을 조회합니다."""
    return await recommendation_request_service.list_requests(db)


@router.post("/post", response_model=RecommendationRequestResponse)
async def create_recommendation_request(
    requester_email: Annotated[str, Query(alias="requesterEmail")],
    professor_email: Annotated[str, Query(alias="professorEmail")],
    explanation: Annotated[str, Query()],
    date_requested: Annotated[datetime, Query(alias="dateRequested")],
    date_needed: Annotated[datetime, Query(alias="dateNeeded")],
    done: Annotated[bool, Query()],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> RecommendationRequestResponse:
    """새 추천서 요청을 생성합니다. 관리자만 가능.

    Create a new recommendation request from query parameters. Admin only.
    """
    data = RecommendationRequestCreate(
        requester_email=requester_email,
        professor_email=professor_email,
        explanation=explanation,
        date_requested=date_requested,
        date_needed=date_needed,
        done=done,
    )
    result = await recommendation_request_service.create_request(db, data)
    await db.commit()
    return result


@router.get("", response_model=RecommendationRequestResponse, responses=_NOT_FOUND)
async def get_recommendation_request(
    request_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> RecommendationRequestResponse:
    """ID로 추천서 요청을 조회합니다."""
    return await recommendation_request_service.get_request(db, request_id)


@router.put("", response_model=RecommendationRequestResponse, responses=_NOT_FOUND)
async def update_recommendation_request(
    request_id: Annotated[int, Query(alias="id")],
    data: RecommendationRequestUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> RecommendationRequestResponse:
    """추천서 요청 전체를 교체합니다. 관리자만 가능.

    Replace every field of a recommendation request. Admin only.
    """
    result = await recommendation_request_service.update_request(db, request_id, data)
    await db.commit()
    return result


@router.delete("", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_recommendation_request(
    request_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    """추천서 요청을 삭제합니다. 관리자만 가능."""
    result = await recommendation_request_service.delete_request(db, request_id)
    await db.commit()
    return result
