"""기본 CRUD 레포지토리 — 모든 엔티티 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all entity repositories.
Provides the generic findAll / findById / save / delete operations every
resource endpoint delegates to. The primary key column is discovered from
the model's mapper, so integer ids and string codes are handled alike.

Usage:
    class MenuItemReviewRepository(BaseRepository[MenuItemReview]):
        def __init__(self) -> None:
            super().__init__(MenuItemReview)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
        pk_column: 기본키 컬럼 속성 (Primary key attribute of the model)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model
        pk_name: str = inspect(model).primary_key[0].key
        self.pk_column: InstrumentedAttribute = getattr(model, pk_name)

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: Any,
    ) -> ModelType | None:
        """기본키로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 기본키 (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.pk_column == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
    ) -> Sequence[ModelType]:
        """모든 레코드를 기본키 순으로 조회합니다.

        Retrieve every record, ordered by primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = select(self.model).order_by(self.pk_column)
        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record; the store assigns generated identifiers.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        db_obj: ModelType,
        update_data: dict[str, Any],
    ) -> ModelType:
        """기존 레코드의 필드를 덮어씁니다.

        Overwrite fields of an already loaded record. The primary key is
        never touched even if present in update_data.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 수정할 레코드 (Loaded record to modify)
            update_data: 덮어쓸 필드와 값의 딕셔너리
                         (Dictionary of fields and values to write)

        Returns:
            ModelType: 수정된 레코드 (Updated record)
        """
        for field, value in update_data.items():
            if field != self.pk_column.key and hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        db_obj: ModelType,
    ) -> None:
        """레코드를 삭제합니다.

        Delete an already loaded record.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 삭제할 레코드 (Loaded record to delete)
        """
        await db.delete(db_obj)
        await db.flush()

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
    ) -> bool:
        """주어진 조건에 일치하는 레코드가 존재하는지 확인합니다.

        Check if a record matching the given filters exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 검색 조건 딕셔너리 (Filter criteria dictionary)

        Returns:
            bool: 레코드 존재 여부 (Whether a matching record exists)
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
