"""UCSB 학생 단체 SQLAlchemy ORM 모델.

UCSB student organization model.
Unlike the other entities, the primary key is the client-supplied org code.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class UCSBOrganization(Base):
    """UCSB 학생 단체 모델.

    Attributes:
        org_code: 단체 코드, 기본키 (Organization code, primary key)
        org_translation_short: 약칭 (Short display name)
        org_translation: 정식 명칭 (Full display name)
        inactive: 비활성 여부 (Whether the organization is inactive)
    """

    __tablename__ = "ucsb_organizations"

    org_code: Mapped[str] = mapped_column(String(100), primary_key=True)
    org_translation_short: Mapped[str] = mapped_column(String(255), nullable=False)
    org_translation: Mapped[str] = mapped_column(String(255), nullable=False)
    inactive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
