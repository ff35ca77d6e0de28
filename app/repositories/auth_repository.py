"""인증 레포지토리 — 리프레시 토큰 저장 및 폐기.

Auth Repository — Stores issued refresh tokens and revokes them on
rotation, logout, or re-login.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.token import RefreshToken


class AuthRepository:
    """리프레시 토큰 레포지토리.

    Refresh tokens are looked up by their full JWT string, which is unique.
    """

    async def save_refresh_token(
        self,
        db: AsyncSession,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> RefreshToken:
        """발급한 리프레시 토큰을 저장합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 토큰 소유자 (Owner user UUID)
            token: JWT 문자열 (Encoded refresh token)
            expires_at: 만료 일시 (Expiry, UTC)
        """
        db_token = RefreshToken(user_id=user_id, token=token, expires_at=expires_at)
        db.add(db_token)
        await db.flush()
        return db_token

    async def find_refresh_token(self, db: AsyncSession, token: str) -> RefreshToken | None:
        result = await db.execute(select(RefreshToken).where(RefreshToken.token == token))
        return result.scalar_one_or_none()

    async def revoke_refresh_token(self, db: AsyncSession, token: str) -> bool:
        """리프레시 토큰 하나를 폐기합니다.

        Returns:
            bool: 실제로 삭제된 토큰이 있었는지 (Whether a stored token was removed)
        """
        result = await db.execute(
            delete(RefreshToken)
            .where(RefreshToken.token == token)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()
        return result.rowcount > 0

    async def revoke_user_tokens(self, db: AsyncSession, user_id: UUID) -> None:
        """사용자의 모든 리프레시 토큰을 폐기합니다 (Revoke every token of one user)."""
        await db.execute(
            delete(RefreshToken)
            .where(RefreshToken.user_id == user_id)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()


# 싱글턴 인스턴스 — Singleton instance
auth_repository: AuthRepository = AuthRepository()
