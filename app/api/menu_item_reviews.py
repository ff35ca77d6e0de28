"""메뉴 리뷰 라우터 — 메뉴 리뷰 CRUD 엔드포인트.

Menu Item Review Router — CRUD endpoints under /api/menuitemreview.

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
from app.schemas.menu_item_review import (
    MenuItemReviewCreate,
    MenuItemReviewResponse,
    MenuItemReviewUpdate,
)
from app.services.menu_item_review_service import menu_item_review_service

router: APIRouter = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("/all", response_model=list[MenuItemReviewResponse])
async def list_menu_item_reviews(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> list[MenuItemReviewResponse]:
    """전체 메뉴 리뷰 목록을 조회합니다.

    List all menu item reviews.
    """
    return await menu_item_review_service.list_reviews(db)


@router.post("/post", response_model=MenuItemReviewResponse)
async def create_menu_item_review(
    item_id: Annotated[int, Query(alias="itemId")],
    reviewer_email: Annotated[str, Query(alias="reviewerEmail")],
    stars: Annotated[int, Query()],
    date_reviewed: Annotated[datetime, Query(alias="dateReviewed", description="ISO datetime, e.g. 2025-10-25T13:45:00")],
    comments: Annotated[str, Query()],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MenuItemReviewResponse:
    """새 메뉴 리뷰를 생성합니다. 관리자만 가능.

    Create a new menu item review from query parameters. Admin only.
    """
    data = MenuItemReviewCreate(
        item_id=item_id,
        reviewer_email=reviewer_email,
        stars=stars,
        date_reviewed=date_reviewed,
        comments=comments,
    )
    result: MenuItemReviewResponse = await menu_item_review_service.create_review(db, data)
    await db.commit()
    return result


@router.get("", response_model=MenuItemReviewResponse, responses=_NOT_FOUND)
async def get_menu_item_review(
    review_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> MenuItemReviewResponse:
    """ID로 메뉴 리뷰를 조회합니다.

    Get a single menu item review.
    """
    return await menu_item_review_service.get_review(db, review_id)


@router.put("", response_model=MenuItemReviewResponse, responses=_NOT_FOUND)
async def update_menu_item_review(
    review_id: Annotated[int, Query(alias="id")],
    data: MenuItemReviewUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MenuItemReviewResponse:
    """메뉴 리뷰 전체를 교체합니다. 관리자만 가능.

    Replace every field of a menu item review. Admin only.
    """
    result: MenuItemReviewResponse = await menu_item_review_service.update_review(db, review_id, data)
    await db.commit()
    return result


@router.delete("", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_menu_item_review(
    review_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    """메뉴 리뷰를 삭제합니다. 관리자만 가능.

    Delete a menu item review. Admin only.
    """
    result: MessageResponse = await menu_item_review_service.delete_review(db, review_id)
    await db.commit()
    return result
