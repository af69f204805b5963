"""Shared schema base."""
from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema whose JSON keys are camelCase (``qrId``, ``workerId``...)."""
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to the naive UTC form used in storage."""
    if value is not None and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def as_utc(value: datetime) -> datetime:
    """Mark a stored (naive UTC) datetime as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Datetime sent to clients with an explicit UTC offset
UtcDateTime = Annotated[datetime, PlainSerializer(as_utc, return_type=datetime, when_used="json")]
