"""추천서 요청 SQLAlchemy ORM 모델.

Recommendation request model — a student asking a professor for a letter.
"""

from datetime import datetime
from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, BigIntId


class RecommendationRequest(Base):
    """추천서 요청 모델.

    Attributes:
        id: 자동 증가 식별자 (Store-assigned identifier)
        requester_email: 요청 학생 이메일 (Requesting student's email)
        professor_email: 교수 이메일 (Professor's email)
        explanation: 요청 사유 (What the letter is for)
        date_requested: 요청 일시 (When the request was made)
        date_needed: 필요 일시 (Deadline for the letter)
        done: 완료 여부 (Whether the letter has been sent)
    """

    __tablename__ = "recommendation_requests"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    professor_email: Mapped[str] = mapped_column(String(255), nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    date_requested: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    date_needed: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
