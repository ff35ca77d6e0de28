"""다이닝 커먼즈 메뉴 항목 라우터.

UCSB Dining Commons Menu Item Router — /api/ucsbdiningcommonsmenuitem.
Only list, create and get are exposed for this resource.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin, require_user
from app.database import get_db
from app.models.user import User
from app.schemas.common import ErrorResponse
from app.schemas.dining_commons_menu_item import (
    UCSBDiningCommonsMenuItemCreate,
    UCSBDiningCommonsMenuItemResponse,
)
from app.services.dining_commons_menu_item_service import dining_commons_menu_item_service

router: APIRouter = APIRouter()


@router.get("/all", response_model=list[UCSBDiningCommonsMenuItemResponse])
async def list_dining_commons_menu_items(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> list[UCSBDiningCommonsMenuItemResponse]:
    """전체 메뉴 항목 목록을 조회합니다."""
    return await dining_commons_menu_item_service.list_menu_items(db)


@router.post("/post", response_model=UCSBDiningCommonsMenuItemResponse)
async def create_dining_commons_menu_item(
    dining_commons_code: Annotated[str, Query(alias="diningCommonsCode")],
    name: Annotated[str, Query()],
    station: Annotated[str, Query()],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> UCSBDiningCommonsMenuItemResponse:
    """새 메뉴 항목을 생성합니다. 관리자만 가능.

    Create a new dining commons menu item. Admin only.
    """
    data = UCSBDiningCommonsMenuItemCreate(
        dining_commons_code=dining_commons_code,
        name=name,
        station=station,
    )
    result = await dining_commons_menu_item_service.create_menu_item(db, data)
    await db.commit()
    return result


@router.get(
    "",
    response_model=UCSBDiningCommonsMenuItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_dining_commons_menu_item(
    item_id: Annotated[int, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> UCSBDiningCommonsMenuItemResponse:
    """ID로 메뉴 항목을 조회합니다.

    Get a single dining commons menu item.
    """
    return await dining_commons_menu_item_service.get_menu_item(db, item_id)
