"""메뉴 리뷰 레포지토리 — 메뉴 리뷰 CRUD 쿼리.

MenuItemReview Repository — CRUD queries for the menu_item_reviews table.
Inherits generic CRUD from BaseRepository.
"""

from app.models.dining import MenuItemReview
from app.repositories.base import BaseRepository


class MenuItemReviewRepository(BaseRepository[MenuItemReview]):
    """menu_item_reviews 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the menu_item_reviews table.
    """

    def __init__(self) -> None:
        super().__init__(MenuItemReview)


# 싱글턴 인스턴스 — Singleton instance
menu_item_review_repository: MenuItemReviewRepository = MenuItemReviewRepository()
