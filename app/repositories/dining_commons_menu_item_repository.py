"""메뉴 항목 레포지토리 — 메뉴 항목 CRUD 쿼리.

UCSBDiningCommonsMenuItem Repository — CRUD queries for the ucsb_dining_commons_menu_items table.
Inherits generic CRUD from BaseRepository.
"""

from app.models.dining import UCSBDiningCommonsMenuItem
from app.repositories.base import BaseRepository


class UCSBDiningCommonsMenuItemRepository(BaseRepository[UCSBDiningCommonsMenuItem]):
    """ucsb_dining_commons_menu_items 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the ucsb_dining_commons_menu_items table.
    """

    def __init__(self) -> None:
        super().__init__(UCSBDiningCommonsMenuItem)


# 싱글턴 인스턴스 — Singleton instance
dining_commons_menu_item_repository: UCSBDiningCommonsMenuItemRepository = UCSBDiningCommonsMenuItemRepository()
