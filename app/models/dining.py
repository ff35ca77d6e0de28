"""식당 관련 SQLAlchemy ORM 모델 정의.

Dining-related SQLAlchemy ORM model definitions.

Tables:
    - ucsb_dining_commons_menu_items: 다이닝 커먼즈 메뉴 항목 (Dining commons menu items)
    - menu_item_reviews: 메뉴 항목 리뷰 (Reviews of menu items)
"""

from datetime import datetime
from sqlalchemy import BigInteger, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, BigIntId


class UCSBDiningCommonsMenuItem(Base):
    """다이닝 커먼즈 메뉴 항목 모델.

    A single menu item served at a station of a UCSB dining commons.

    Attributes:
        id: 자동 증가 식별자 (Store-assigned identifier)
        dining_commons_code: 식당 코드 (Dining commons code, e.g. "ortega")
        name: 메뉴 이름 (Item name)
        station: 배식 스테이션 (Serving station)
    """

    __tablename__ = "ucsb_dining_commons_menu_items"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    dining_commons_code: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    station: Mapped[str] = mapped_column(String(255), nullable=False)


class MenuItemReview(Base):
    """메뉴 항목 리뷰 모델.

    A review of a dining commons menu item.
    item_id references a menu item but is not enforced as a foreign key.

    Attributes:
        id: 자동 증가 식별자 (Store-assigned identifier)
        item_id: 리뷰 대상 메뉴 항목 ID (Reviewed menu item id, unenforced)
        reviewer_email: 작성자 이메일 (Reviewer email)
        stars: 별점 (Star rating)
        date_reviewed: 작성 일시 (Review timestamp, naive)
        comments: 코멘트 (Free text comments)
    """

    __tablename__ = "menu_item_reviews"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    reviewer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    stars: Mapped[int] = mapped_column(Integer, nullable=False)
    date_reviewed: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    comments: Mapped[str] = mapped_column(Text, nullable=False)
