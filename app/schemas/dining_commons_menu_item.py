"""다이닝 커먼즈 메뉴 항목 Pydantic 스키마 정의.

UCSBDiningCommonsMenuItem request/response schemas.
"""

from app.schemas.common import CamelModel


class UCSBDiningCommonsMenuItemCreate(CamelModel):
    """메뉴 항목 생성 데이터.

    Attributes:
        dining_commons_code: 식당 코드 (Dining commons code)
        name: 메뉴 이름 (Item name)
        station: 배식 스테이션 (Serving station)
    """

    dining_commons_code: str
    name: str
    station: str


class UCSBDiningCommonsMenuItemResponse(UCSBDiningCommonsMenuItemCreate):
    """메뉴 항목 응답 스키마 — 생성 필드 + ID."""

    id: int
