"""학생 단체 Pydantic 요청/응답 스키마 정의.

UCSBOrganization request/response schemas.
The org code is the identifier, so it appears in create and response
schemas but is never overwritten by an update.
"""

from app.schemas.common import CamelModel


class UCSBOrganizationUpdate(CamelModel):
    """학생 단체 전체 교체 요청 스키마.

    Full replacement body for PUT. An orgCode in the body is accepted and
    ignored; the query parameter identifies the record.

    Attributes:
        org_translation_short: 약칭 (Short display name)
        org_translation: 정식 명칭 (Full display name)
        inactive: 비활성 여부 (Inactive flag)
    """

    org_code: str | None = None
    org_translation_short: str
    org_translation: str
    inactive: bool


class UCSBOrganizationCreate(UCSBOrganizationUpdate):
    """학생 단체 생성 데이터 — org_code 필수."""

    org_code: str


class UCSBOrganizationResponse(CamelModel):
    """학생 단체 응답 스키마."""

    org_code: str
    org_translation_short: str
    org_translation: str
    inactive: bool
