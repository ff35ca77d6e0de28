"""추천서 요청 Pydantic 요청/응답 스키마 정의.

RecommendationRequest request/response schemas.
"""

from datetime import datetime

from app.schemas.common import CamelModel, LocalDateTime


class RecommendationRequestCreate(CamelModel):
    """추천서 요청 생성 데이터.

    Attributes:
        requester_email: 요청 학생 이메일 (Requesting student's email)
        professor_email: 교수 이메일 (Professor's email)
        explanation: 요청 사유 (What the letter is for)
        date_requested: 요청 일시 (When the request was made)
        date_needed: 필요 일시 (Deadline)
        done: 완료 여부 (Whether the letter has been sent)
    """

    requester_email: str
    professor_email: str
    explanation: str
    date_requested: LocalDateTime
    date_needed: LocalDateTime
    done: bool


class RecommendationRequestUpdate(RecommendationRequestCreate):
    """추천서 요청 전체 교체 요청 스키마 (body의 id는 무시)."""

    id: int | None = None


class RecommendationRequestResponse(CamelModel):
    """추천서 요청 응답 스키마."""

    id: int
    requester_email: str
    professor_email: str
    explanation: str
    date_requested: datetime
    date_needed: datetime
    done: bool
