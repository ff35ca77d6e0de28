"""초기 데이터 시드 스크립트 — 테이블 및 관리자 계정 생성.

Seed script — Creates tables and the initial admin account.
Run this script once to bootstrap a fresh database.

Usage:
    python -m app.seed

Creates:
    - 모든 테이블 (All tables from ORM metadata)
    - 1개 관리자 계정: SEED_ADMIN_EMAIL / SEED_ADMIN_PASSWORD (1 admin user)
"""

import asyncio

from app.config import settings
from app.database import async_session, engine, Base
from app.models import User  # noqa: F401 — register all models with metadata
from app.repositories.user_repository import user_repository
from app.services.user_service import user_service


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Idempotent: 관리자 계정이 이미 있으면 건너뜁니다 (Skips if the admin exists).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await user_repository.get_by_email(db, settings.SEED_ADMIN_EMAIL) is not None:
            print("Already seeded. Skipping.")
            return

        admin: User = await user_service.create_user(
            db,
            email=settings.SEED_ADMIN_EMAIL,
            password=settings.SEED_ADMIN_PASSWORD,
            full_name="System Admin",
            is_admin=True,
        )
        await db.commit()
        print(f"Seeded: admin user={admin.email}")


if __name__ == "__main__":
    asyncio.run(seed())
