"""관리자 사용자 라우터 — 사용자 목록 조회.

Admin User Router — Lists all registered users. Admin only.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.user import UserResponse
from app.services.user_service import user_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[UserResponse]:
    """전체 사용자 목록을 조회합니다. 관리자만 가능."""
    return await user_service.list_users(db)
