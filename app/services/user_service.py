"""사용자 서비스 — 사용자 조회 및 생성 비즈니스 로직.

User Service — Admin user listing and account creation used by the
seed script.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.user_repository import user_repository
from app.schemas.user import UserResponse
from app.utils.exceptions import DuplicateError
from app.utils.password import hash_password


class UserService:
    """사용자 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            email=user.email,
            full_name=user.full_name,
            is_admin=user.is_admin,
            is_active=user.is_active,
            created_at=user.created_at,
        )

    async def list_users(self, db: AsyncSession) -> list[UserResponse]:
        """전체 사용자 목록을 조회합니다.

        List all users in creation order.
        """
        users: list[User] = await user_repository.list_users(db)
        return [self._to_response(u) for u in users]

    async def create_user(
        self,
        db: AsyncSession,
        email: str,
        password: str,
        full_name: str,
        is_admin: bool = False,
    ) -> User:
        """새 사용자를 생성합니다. 이메일은 소문자로 저장됩니다.

        Create a user account; the email is stored lower-cased.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 로그인 이메일 (Login email)
            password: 평문 비밀번호 (Plain text password, hashed before storage)
            full_name: 실명 (Full display name)
            is_admin: 관리자 여부 (Admin flag)

        Returns:
            User: 생성된 사용자 (Created user)

        Raises:
            DuplicateError: 이메일이 이미 사용 중일 때 (Email already registered)
        """
        normalized: str = email.strip().lower()
        if await user_repository.get_by_email(db, normalized) is not None:
            raise DuplicateError("Email already registered")

        return await user_repository.create(db, {
            "email": normalized,
            "full_name": full_name,
            "password_hash": hash_password(password),
            "is_admin": is_admin,
        })


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
