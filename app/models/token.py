"""리프레시 토큰 모델.

Refresh token model. A user holds at most one live refresh token; it is
replaced on login and on every refresh, and removed on logout.
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.user import User


class RefreshToken(Base):
    """발급된 리프레시 토큰.

    Attributes:
        id: 고유 식별자 (Primary key UUID)
        user_id: 소유 사용자 (Owner, cascades on user delete)
        token: 인코딩된 JWT 전체 문자열 (Full encoded JWT, unique lookup key)
        expires_at: 만료 일시 UTC (Expiry, UTC)
        created_at: 발급 일시 UTC (Issue time, UTC)
    """

    __tablename__ = "refresh_tokens"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    token: Mapped[str] = mapped_column(String(512), unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped["User"] = relationship(back_populates="refresh_tokens")

    def is_expired(self, now: datetime | None = None) -> bool:
        """만료 여부 (Whether the token is past its expiry).

        SQLite returns naive values for timezone-aware columns; those are
        read as UTC.
        """
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at <= now
