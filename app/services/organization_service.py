"""학생 단체 서비스 — 학생 단체 CRUD 비즈니스 로직.

UCSBOrganization Service — CRUD keyed by the client-supplied org code.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.organization import UCSBOrganization
from app.repositories.organization_repository import organization_repository
from app.schemas.common import MessageResponse
from app.schemas.organization import (
    UCSBOrganizationCreate,
    UCSBOrganizationResponse,
    UCSBOrganizationUpdate,
)
from app.utils.exceptions import DuplicateError, EntityNotFoundError


class UCSBOrganizationService:
    """학생 단체 관련 비즈니스 로직을 처리하는 서비스.

    Service handling UCSB organization operations.
    """

    async def _get_or_raise(self, db: AsyncSession, org_code: str) -> UCSBOrganization:
        org: UCSBOrganization | None = await organization_repository.get_by_id(db, org_code)
        if org is None:
            raise EntityNotFoundError(UCSBOrganization, org_code)
        return org

    async def list_organizations(self, db: AsyncSession) -> list[UCSBOrganizationResponse]:
        """전체 학생 단체 목록을 org code 순으로 조회합니다."""
        orgs = await organization_repository.get_all(db)
        return [UCSBOrganizationResponse.model_validate(o) for o in orgs]

    async def create_organization(
        self,
        db: AsyncSession,
        data: UCSBOrganizationCreate,
    ) -> UCSBOrganizationResponse:
        """새 학생 단체를 생성합니다.

        Create an organization. The org code is its identifier, so it must
        not already be taken.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 단체 생성 데이터 (Organization fields)

        Returns:
            UCSBOrganizationResponse: 저장된 단체 (Persisted organization)

        Raises:
            DuplicateError: 같은 org code가 이미 존재할 때 (orgCode already exists)
        """
        if await organization_repository.exists(db, {"org_code": data.org_code}):
            raise DuplicateError(f"UCSBOrganization with id {data.org_code} already exists")

        try:
            org: UCSBOrganization = await organization_repository.create(db, data.model_dump())
        except IntegrityError:
            # 동시 등록으로 exists 검사 이후 선점됨 (Taken by a concurrent insert after the check)
            await db.rollback()
            raise DuplicateError(f"UCSBOrganization with id {data.org_code} already exists")

        return UCSBOrganizationResponse.model_validate(org)

    async def get_organization(self, db: AsyncSession, org_code: str) -> UCSBOrganizationResponse:
        """org code로 학생 단체를 조회합니다.

        Raises:
            EntityNotFoundError: 단체가 없을 때 (No organization with this code)
        """
        return UCSBOrganizationResponse.model_validate(await self._get_or_raise(db, org_code))

    async def update_organization(
        self,
        db: AsyncSession,
        org_code: str,
        data: UCSBOrganizationUpdate,
    ) -> UCSBOrganizationResponse:
        """학생 단체의 모든 필드를 교체합니다. org code는 변경되지 않습니다.

        Overwrite every non-key field of an existing organization.

        Raises:
            EntityNotFoundError: 단체가 없을 때, 저장소는 변경되지 않음
                                 (No organization with this code; nothing is written)
        """
        org: UCSBOrganization = await self._get_or_raise(db, org_code)
        org = await organization_repository.update(
            db, org, data.model_dump(exclude={"org_code"})
        )
        return UCSBOrganizationResponse.model_validate(org)

    async def delete_organization(self, db: AsyncSession, org_code: str) -> MessageResponse:
        """학생 단체를 삭제합니다.

        Raises:
            EntityNotFoundError: 단체가 없을 때 (No organization with this code)
        """
        org: UCSBOrganization = await self._get_or_raise(db, org_code)
        await organization_repository.delete(db, org)
        return MessageResponse(message=f"UCSBOrganization with id {org_code} deleted")


# 싱글턴 인스턴스 — Singleton instance
organization_service: UCSBOrganizationService = UCSBOrganizationService()
