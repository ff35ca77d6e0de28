"""사용자 관련 Pydantic 응답 스키마 정의.

User response schema for the admin user listing.
"""

from datetime import datetime

from pydantic import BaseModel


class UserResponse(BaseModel):
    """사용자 응답 스키마.

    Attributes:
        id: 사용자 UUID (User unique identifier)
        email: 로그인 이메일 (Login email)
        full_name: 실명 (Full display name)
        is_admin: 관리자 플래그 (Stored admin flag)
        is_active: 활성 상태 (Active status)
        created_at: 생성 일시 (Creation timestamp)
    """

    id: str
    email: str
    full_name: str
    is_admin: bool
    is_active: bool
    created_at: datetime
