"""Tool schemas for request/response validation."""
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from toolcrib.models.tool import ToolStatus
from toolcrib.schemas.base import CamelModel, UtcDateTime, to_naive_utc


class ToolBase(CamelModel):
    """Base tool schema."""
    name: str = Field(..., min_length=1)
    qr_id: str = Field(..., min_length=1)
    is_calibration_tool: bool = False
    next_calibration_date: Optional[UtcDateTime] = None


class ToolCreate(ToolBase):
    """Schema for creating a tool."""
    
    @field_validator("next_calibration_date")
    @classmethod
    def _normalize_date(cls, value):
        return to_naive_utc(value)


class CalibrationRenewal(CamelModel):
    """Schema for renewing a tool's calibration date."""
    next_calibration_date: datetime
    
    @field_validator("next_calibration_date")
    @classmethod
    def _normalize_date(cls, value):
        return to_naive_utc(value)


class ToolResponse(ToolBase):
    """Schema for tool response."""
    id: int
    status: ToolStatus
    created_at: UtcDateTime
    updated_at: Optional[UtcDateTime] = None
