"""커스텀 예외 클래스 모듈.

Custom exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns
and the EntityNotFoundError domain exception, which a global handler in
app.main renders as the structured 404 envelope.

Usage:
    from app.utils.exceptions import EntityNotFoundError, ForbiddenError
    raise EntityNotFoundError(MenuItemReview, 7)
    raise ForbiddenError()
"""

from typing import Any

from fastapi import HTTPException, status


class EntityNotFoundError(Exception):
    """ID로 엔티티를 찾을 수 없을 때 발생하는 도메인 예외.

    Raised when no record of the given entity type exists for an id.
    Rendered as HTTP 404 with {"type": "EntityNotFoundException", "message": ...}.

    Args:
        entity: 엔티티 클래스 또는 이름 (Entity class or its name)
        entity_id: 찾지 못한 식별자 (The identifier that did not resolve)
    """

    error_type: str = "EntityNotFoundException"

    def __init__(self, entity: type | str, entity_id: Any) -> None:
        self.entity_name: str = entity if isinstance(entity, str) else entity.__name__
        self.entity_id: Any = entity_id
        self.message: str = f"{self.entity_name} with id {entity_id} not found"
        super().__init__(self.message)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    Raised when attempting to create a resource whose identifier is taken
    (e.g. an existing orgCode or user email).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 권한 부족 또는 미인증 시 사용.

    Raised when the caller is not logged in or lacks the required capability.
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    Raised when presented credentials are invalid or expired.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
