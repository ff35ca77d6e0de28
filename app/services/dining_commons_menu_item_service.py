"""다이닝 커먼즈 메뉴 항목 서비스.

UCSBDiningCommonsMenuItem Service — List, create and get only.
Menu items have no update or delete operation.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.dining import UCSBDiningCommonsMenuItem
from app.repositories.dining_commons_menu_item_repository import (
    dining_commons_menu_item_repository,
)
from app.schemas.dining_commons_menu_item import (
    UCSBDiningCommonsMenuItemCreate,
    UCSBDiningCommonsMenuItemResponse,
)
from app.utils.exceptions import EntityNotFoundError


class UCSBDiningCommonsMenuItemService:
    """메뉴 항목 관련 비즈니스 로직을 처리하는 서비스."""

    async def list_menu_items(self, db: AsyncSession) -> list[UCSBDiningCommonsMenuItemResponse]:
        items = await dining_commons_menu_item_repository.get_all(db)
        return [UCSBDiningCommonsMenuItemResponse.model_validate(i) for i in items]

    async def create_menu_item(
        self,
        db: AsyncSession,
        data: UCSBDiningCommonsMenuItemCreate,
    ) -> UCSBDiningCommonsMenuItemResponse:
        """새 메뉴 항목을 생성합니다.

        Create a menu item from the submitted fields.
        """
        item: UCSBDiningCommonsMenuItem = await dining_commons_menu_item_repository.create(
            db, data.model_dump()
        )
        return UCSBDiningCommonsMenuItemResponse.model_validate(item)

    async def get_menu_item(
        self,
        db: AsyncSession,
        item_id: int,
    ) -> UCSBDiningCommonsMenuItemResponse:
        """ID로 메뉴 항목을 조회합니다.

        Raises:
            EntityNotFoundError: 항목이 없을 때 (No menu item with this id)
        """
        item: UCSBDiningCommonsMenuItem | None = await dining_commons_menu_item_repository.get_by_id(
            db, item_id
        )
        if item is None:
            raise EntityNotFoundError(UCSBDiningCommonsMenuItem, item_id)
        return UCSBDiningCommonsMenuItemResponse.model_validate(item)


# 싱글턴 인스턴스 — Singleton instance
dining_commons_menu_item_service: UCSBDiningCommonsMenuItemService = UCSBDiningCommonsMenuItemService()
