"""메뉴 리뷰 Pydantic 요청/응답 스키마 정의.

MenuItemReview request/response schemas.
"""

from datetime import datetime

from app.schemas.common import CamelModel, LocalDateTime


class MenuItemReviewCreate(CamelModel):
    """메뉴 리뷰 생성 데이터 — POST 쿼리 파라미터에서 구성.

    Fields of a new review, assembled from the POST query parameters.
    """

    item_id: int  # 메뉴 항목 ID (Reviewed menu item id)
    reviewer_email: str
    stars: int  # 별점 (Star rating)
    date_reviewed: LocalDateTime  # ISO 형식, 예: 2025-10-25T13:45:00
    comments: str


class MenuItemReviewUpdate(MenuItemReviewCreate):
    """메뉴 리뷰 전체 교체 요청 스키마.

    Full replacement body for PUT. Every field is required; an id in the
    body is accepted and ignored in favour of the query parameter.
    """

    id: int | None = None


class MenuItemReviewResponse(CamelModel):
    """메뉴 리뷰 응답 스키마.

    Attributes:
        id: 리뷰 ID (Store-assigned identifier)
        item_id: 메뉴 항목 ID (Menu item id)
        reviewer_email: 작성자 이메일 (Reviewer email)
        stars: 별점 (Star rating)
        date_reviewed: 작성 일시 (Review timestamp)
        comments: 코멘트 (Comments)
    """

    id: int
    item_id: int
    reviewer_email: str
    stars: int
    date_reviewed: datetime
    comments: str
