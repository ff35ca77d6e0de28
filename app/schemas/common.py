"""공통 Pydantic 요청/응답 스키마 정의.

Common Pydantic request/response schema definitions shared by every
resource router: the camelCase base model, the generic message response,
and the 404 error envelope.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_local(value: datetime) -> datetime:
    # 오프셋은 버리고 벽시계 시각만 유지 (Keep the wall-clock time, drop any offset)
    return value.replace(tzinfo=None)


# 시간대 없는 일시 — 컬럼이 TIMESTAMP WITHOUT TIME ZONE
# Timezone-less timestamp; "2025-10-25T20:15:00+05:00" is stored as 2025-10-25T20:15:00
LocalDateTime = Annotated[datetime, AfterValidator(_as_local)]


class CamelModel(BaseModel):
    """camelCase JSON 별칭을 사용하는 기본 스키마.

    Base schema for entity payloads. Python attributes stay snake_case while
    the JSON wire format uses camelCase (itemId, reviewerEmail, ...).
    Accepts either spelling on input and reads attributes off ORM objects.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message response schema for simple confirmations,
    e.g. "MenuItemReview with id 15 deleted".

    Attributes:
        message: 응답 메시지 (Response message string)
    """

    message: str  # 응답 메시지 (Human-readable confirmation message)


class ErrorResponse(BaseModel):
    """엔티티 미발견 오류 응답 스키마.

    Error envelope returned with HTTP 404 when an id does not resolve.

    Attributes:
        type: 예외 유형 이름 (Always "EntityNotFoundException")
        message: "<Entity> with id <id> not found"
    """

    type: str
    message: str
