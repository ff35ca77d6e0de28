"""학생 단체 라우터 — 학생 단체 CRUD 엔드포인트.

UCSB Organization Router — CRUD endpoints under /api/UCSBOrganization.
The id query parameter carries the org code.

Permission Matrix (역할별 권한 설계):
    - 목록/상세 조회: 로그인 사용자 (user)
    - 등록/수정/삭제: 관리자만 (admin)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin, require_user
from app.database import get_db
from app.models.user import User
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.organization import (
    UCSBOrganizationCreate,
    UCSBOrganizationResponse,
    UCSBOrganizationUpdate,
)
from app.services.organization_service import organization_service

router: APIRouter = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("/all", response_model=list[UCSBOrganizationResponse])
async def list_organizations(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> list[UCSBOrganizationResponse]:
    """전체 학생 단체 목록을 조회합니다."""
    return await organization_service.list_organizations(db)


@router.post("/post", response_model=UCSBOrganizationResponse)
async def create_organization(
    org_code: Annotated[str, Query(alias="orgCode")],
    org_translation_short: Annotated[str, Query(alias="orgTranslationShort")],
    org_translation: Annotated[str, Query(alias="orgTranslation")],
    inactive: Annotated[bool, Query()],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> UCSBOrganizationResponse:
    """새 학생 단체를 생성합니다. 관리자만 가능.

    Create a new organization from query parameters. Admin only.
    """
    data = UCSBOrganizationCreate(
        org_code=org_code,
        org_translation_short=org_translation_short,
        org_translation=org_translation,
        inactive=inactive,
    )
    result = await organization_service.create_organization(db, data)
    await db.commit()
    return result


@router.get("", response_model=UCSBOrganizationResponse, responses=_NOT_FOUND)
async def get_organization(
    org_code: Annotated[str, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_user)],
) -> UCSBOrganizationResponse:
    """org code로 학생 단체를 조회합니다."""
    return await organization_service.get_organization(db, org_code)


@router.put("", response_model=UCSBOrganizationResponse, responses=_NOT_FOUND)
async def update_organization(
    org_code: Annotated[str, Query(alias="id")],
    data: UCSBOrganizationUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> UCSBOrganizationResponse:
    """학생 단체 전체를 교체합니다. 관리자만 가능.

    Replace every non-key field of an organization. Admin only.
    """
    result = await organization_service.update_organization(db, org_code, data)
    await db.commit()
    return result


@router.delete("", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_organization(
    org_code: Annotated[str, Query(alias="id")],
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> MessageResponse:
    """학생 단체를 삭제합니다. 관리자만 가능."""
    result = await organization_service.delete_organization(db, org_code)
    await db.commit()
    return result
