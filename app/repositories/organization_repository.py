"""학생 단체 레포지토리 — 학생 단체 CRUD 쿼리.

UCSBOrganization Repository — CRUD queries for the ucsb_organizations table.
The primary key is the org code string rather than a generated integer.
"""

from app.models.organization import UCSBOrganization
from app.repositories.base import BaseRepository


class UCSBOrganizationRepository(BaseRepository[UCSBOrganization]):
    """ucsb_organizations 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the ucsb_organizations table.
    """

    def __init__(self) -> None:
        super().__init__(UCSBOrganization)


# 싱글턴 인스턴스 — Singleton instance
organization_repository: UCSBOrganizationRepository = UCSBOrganizationRepository()
