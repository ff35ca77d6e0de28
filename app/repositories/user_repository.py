"""사용자 레포지토리 — 사용자 조회 쿼리.

User Repository — Queries for the users table.
Extends BaseRepository with email lookup and creation-ordered listing.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다. 대소문자를 구분하지 않습니다.

        Retrieve a user by login email, case-insensitively.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 조회할 이메일 (Email to look up)

        Returns:
            User | None: 조회된 사용자 또는 None (Found user or None)
        """
        query: Select = select(User).where(User.email == email.strip().lower())
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def list_users(self, db: AsyncSession) -> list[User]:
        """전체 사용자를 생성 순으로 조회합니다.

        Retrieve all users ordered by creation time.
        """
        result = await db.execute(select(User).order_by(User.created_at))
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
