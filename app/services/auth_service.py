"""인증 서비스 — 로그인, 토큰 갱신, 권한 판별 비즈니스 로직.

Auth Service — Business logic for login, token refresh, logout, the
current user profile, and deciding which capabilities a user holds.

Capabilities:
    user  — 인증된 모든 활성 사용자 (Any authenticated, active user)
    admin — is_admin 플래그 또는 ADMIN_EMAILS 설정에 포함된 사용자
            (is_admin flag set, or email listed in ADMIN_EMAILS)
"""

from datetime import datetime, timedelta, timezone
from enum import Enum

import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.user import User
from app.repositories.auth_repository import auth_repository
from app.repositories.user_repository import user_repository
from app.schemas.auth import LoginRequest, RefreshRequest, TokenResponse, UserMeResponse
from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import create_access_token, create_refresh_token, decode_token
from app.utils.password import verify_password


class Capability(str, Enum):
    """엔드포인트 접근 권한 수준.

    Authorization level gating an endpoint.
    """

    USER = "user"
    ADMIN = "admin"


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication and capability resolution.
    """

    def is_admin(self, user: User) -> bool:
        """사용자가 admin 권한을 보유하는지 확인합니다.

        Whether the user holds the admin capability.
        """
        admin_emails: set[str] = {e.strip().lower() for e in settings.ADMIN_EMAILS}
        return bool(user.is_admin) or user.email.lower() in admin_emails

    def has_capability(self, user: User, capability: Capability) -> bool:
        """사용자가 주어진 권한을 보유하는지 확인합니다.

        Whether an authenticated, active user holds the given capability.
        """
        if not user.is_active:
            return False
        if capability is Capability.ADMIN:
            return self.is_admin(user)
        return True

    def roles_for(self, user: User) -> list[str]:
        """사용자의 역할 이름 목록을 반환합니다 (ROLE_USER, ROLE_ADMIN).

        Role names reported by the profile endpoint.
        """
        roles: list[str] = ["ROLE_USER"]
        if self.is_admin(user):
            roles.append("ROLE_ADMIN")
        return roles

    async def _generate_tokens(
        self,
        db: AsyncSession,
        user: User,
    ) -> TokenResponse:
        """액세스 토큰과 리프레시 토큰을 생성합니다.

        Issue an access/refresh pair and persist the refresh token,
        replacing any the user already held.
        """
        payload: dict[str, str | bool] = {
            "sub": str(user.id),
            "email": user.email,
            "admin": self.is_admin(user),
        }
        access_token: str = create_access_token(payload)
        refresh_token: str = create_refresh_token(payload)

        # 사용자당 리프레시 토큰은 하나 (One live refresh token per user)
        await auth_repository.revoke_user_tokens(db, user.id)

        expires_at: datetime = datetime.now(timezone.utc) + timedelta(
            days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS
        )
        await auth_repository.save_refresh_token(
            db, user_id=user.id, token=refresh_token, expires_at=expires_at
        )

        return TokenResponse(access_token=access_token, refresh_token=refresh_token)

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """이메일/비밀번호 로그인을 처리합니다.

        Process email + password login.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)

        Returns:
            TokenResponse: 토큰 응답 (Token response)

        Raises:
            UnauthorizedError: 잘못된 인증 정보이거나 비활성 계정일 때
                               (Invalid credentials or deactivated account)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None or not verify_password(data.password, user.password_hash):
            raise UnauthorizedError("Invalid email or password")

        if not user.is_active:
            raise UnauthorizedError("Account is deactivated")

        return await self._generate_tokens(db, user)

    async def refresh_tokens(
        self,
        db: AsyncSession,
        data: RefreshRequest,
    ) -> TokenResponse:
        """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

        Rotate a refresh token into a new token pair.

        Raises:
            UnauthorizedError: 유효하지 않거나 만료된 리프레시 토큰일 때
                               (Invalid or expired refresh token)
        """
        db_token = await auth_repository.find_refresh_token(db, data.refresh_token)
        if db_token is None:
            raise UnauthorizedError("Invalid refresh token")

        if db_token.is_expired():
            raise UnauthorizedError("Refresh token has expired")

        try:
            payload: dict = decode_token(data.refresh_token)
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid refresh token")

        if payload.get("type") != "refresh" or str(db_token.user_id) != payload.get("sub"):
            raise UnauthorizedError("Invalid refresh token payload")

        user: User | None = await user_repository.get_by_id(db, db_token.user_id)
        if user is None or not user.is_active:
            raise UnauthorizedError("User not found or inactive")

        # 새 토큰 발급 시 기존 토큰도 함께 폐기됨 (Issuing a new pair revokes the old token)
        return await self._generate_tokens(db, user)

    async def logout(
        self,
        db: AsyncSession,
        refresh_token: str,
    ) -> None:
        """로그아웃 처리 — 리프레시 토큰을 삭제합니다.

        Revoke the given refresh token. Unknown tokens are ignored.
        """
        await auth_repository.revoke_refresh_token(db, refresh_token)

    def get_me(self, user: User) -> UserMeResponse:
        """현재 로그인한 사용자 프로필을 반환합니다.

        Return the profile of the currently authenticated user.
        """
        return UserMeResponse(
            id=str(user.id),
            email=user.email,
            full_name=user.full_name,
            admin=self.is_admin(user),
            roles=self.roles_for(user),
        )


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
