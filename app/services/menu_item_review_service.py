"""메뉴 리뷰 서비스 — 메뉴 리뷰 CRUD 비즈니스 로직.

MenuItemReview Service — List, create, get, full-replacement update and
delete of menu item reviews.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.dining import MenuItemReview
from app.repositories.menu_item_review_repository import menu_item_review_repository
from app.schemas.common import MessageResponse
from app.schemas.menu_item_review import (
    MenuItemReviewCreate,
    MenuItemReviewResponse,
    MenuItemReviewUpdate,
)
from app.utils.exceptions import EntityNotFoundError


class MenuItemReviewService:
    """메뉴 리뷰 관련 비즈니스 로직을 처리하는 서비스.

    Service handling menu item review operations.
    """

    def _to_response(self, review: MenuItemReview) -> MenuItemReviewResponse:
        return MenuItemReviewResponse.model_validate(review)

    async def _get_or_raise(self, db: AsyncSession, review_id: int) -> MenuItemReview:
        review: MenuItemReview | None = await menu_item_review_repository.get_by_id(db, review_id)
        if review is None:
            raise EntityNotFoundError(MenuItemReview, review_id)
        return review

    async def list_reviews(self, db: AsyncSession) -> list[MenuItemReviewResponse]:
        """전체 메뉴 리뷰 목록을 조회합니다.

        List every menu item review in id order.
        """
        reviews = await menu_item_review_repository.get_all(db)
        return [self._to_response(r) for r in reviews]

    async def create_review(
        self,
        db: AsyncSession,
        data: MenuItemReviewCreate,
    ) -> MenuItemReviewResponse:
        """새 메뉴 리뷰를 생성합니다.

        Create a review from the submitted fields; the id is store assigned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 리뷰 생성 데이터 (Review fields)

        Returns:
            MenuItemReviewResponse: 저장된 리뷰 (Persisted review)
        """
        review: MenuItemReview = await menu_item_review_repository.create(db, data.model_dump())
        return self._to_response(review)

    async def get_review(self, db: AsyncSession, review_id: int) -> MenuItemReviewResponse:
        """ID로 메뉴 리뷰를 조회합니다.

        Raises:
            EntityNotFoundError: 리뷰가 없을 때 (No review with this id)
        """
        return self._to_response(await self._get_or_raise(db, review_id))

    async def update_review(
        self,
        db: AsyncSession,
        review_id: int,
        data: MenuItemReviewUpdate,
    ) -> MenuItemReviewResponse:
        """메뉴 리뷰의 모든 필드를 교체합니다.

        Overwrite every field of an existing review with the request body.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            review_id: 리뷰 ID (Review id from the query string)
            data: 전체 교체 데이터 (Full replacement body)

        Returns:
            MenuItemReviewResponse: 수정된 리뷰 (Updated review)

        Raises:
            EntityNotFoundError: 리뷰가 없을 때, 저장소는 변경되지 않음
                                 (No review with this id; nothing is written)
        """
        review: MenuItemReview = await self._get_or_raise(db, review_id)
        review = await menu_item_review_repository.update(
            db, review, data.model_dump(exclude={"id"})
        )
        return self._to_response(review)

    async def delete_review(self, db: AsyncSession, review_id: int) -> MessageResponse:
        """메뉴 리뷰를 삭제합니다.

        Raises:
            EntityNotFoundError: 리뷰가 없을 때 (No review with this id)
        """
        review: MenuItemReview = await self._get_or_raise(db, review_id)
        await menu_item_review_repository.delete(db, review)
        return MessageResponse(message=f"MenuItemReview with id {review_id} deleted")


# 싱글턴 인스턴스 — Singleton instance
menu_item_review_service: MenuItemReviewService = MenuItemReviewService()
