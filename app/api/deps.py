"""FastAPI 의존성 주입 모듈 — 인증 및 권한 검사.

FastAPI dependency injection module — Authentication and capability checks.
Every resource endpoint declares the capability it needs ("user" or
"admin") as a dependency, so the check runs before the handler body and
before any request payload is acted on.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. 헤더가 없으면 403 (Missing header means logged out → 403)
    3. decode_token()이 JWT를 검증 (decode_token verifies the JWT)
    4. 페이로드의 "sub"로 DB에서 사용자를 조회 (User fetched by "sub")
    5. 사용자 활성 상태를 확인 (User active status is verified)

Authorization Flow (require_capability):
    1. get_current_user로 사용자 인증 (User authenticated via get_current_user)
    2. auth_service.has_capability로 권한 확인 (Capability checked)
    3. 권한이 없으면 403 Forbidden 반환 (Returns 403 if not held)
"""

from typing import Annotated, Callable, Awaitable
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User
from app.repositories.user_repository import user_repository
from app.services.auth_service import Capability, auth_service
from app.utils.exceptions import ForbiddenError, UnauthorizedError
from app.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — auto_error=False: 누락 시 직접 403 처리
# (Missing credentials are turned into 403 below rather than by HTTPBearer)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer token and return the authenticated user.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials, None if absent)
        db: 비동기 DB 세션 (Async database session)

    Returns:
        User: 인증된 사용자 ORM 인스턴스 (Authenticated user ORM instance)

    Raises:
        ForbiddenError(403): 토큰이 없음 — 로그아웃 상태 (No token; logged out)
        UnauthorizedError(401): 토큰이 유효하지 않거나 만료됨 (Invalid or expired token)
        UnauthorizedError(401): 사용자를 찾을 수 없거나 비활성 (User not found or inactive)
    """
    if credentials is None:
        raise ForbiddenError("Not authenticated")

    try:
        payload: dict = decode_token(credentials.credentials)
        # 토큰 타입 검증 — Reject refresh tokens used as access tokens
        if payload.get("type") != "access":
            raise UnauthorizedError("Invalid token type")
        user_id: UUID = UUID(payload["sub"])
    except UnauthorizedError:
        raise
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        raise UnauthorizedError("Invalid or expired token")

    user: User | None = await user_repository.get_by_id(db, user_id)

    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")

    return user


def require_capability(capability: Capability) -> Callable[..., Awaitable[User]]:
    """권한 기반 접근 검사 의존성 팩토리.

    Dependency factory enforcing a capability on an endpoint.

    Args:
        capability: 필요한 권한 (Required capability, USER or ADMIN)

    Returns:
        FastAPI 의존성 함수 — 인증된 사용자 반환 또는 403 발생
        (FastAPI dependency function that returns User or raises 403)
    """
    async def _check(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if not auth_service.has_capability(current_user, capability):
            raise ForbiddenError()
        return current_user
    return _check


# 편의 의존성 — Pre-configured capability dependencies
require_user = require_capability(Capability.USER)    # 로그인 사용자 (Any logged-in user)
require_admin = require_capability(Capability.ADMIN)  # 관리자만 (Admins only)
