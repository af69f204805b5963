"""Check-out/check-in schemas."""
from typing import Optional
from pydantic import Field

from toolcrib.models.log import LogType
from toolcrib.schemas.base import CamelModel, UtcDateTime
from toolcrib.schemas.tool import ToolResponse


class CheckoutRequest(CamelModel):
    """A worker taking a tool out to a client or job."""
    qr_id: str = Field(..., min_length=1)
    worker_id: str = Field(..., min_length=1)
    client_name: Optional[str] = None


class CheckinRequest(CamelModel):
    """A worker returning a tool to the showroom."""
    qr_id: str = Field(..., min_length=1)
    worker_id: str = Field(..., min_length=1)
    comments: Optional[str] = None


class LogResponse(CamelModel):
    """Schema for a log entry."""
    id: int
    type: LogType
    user_id: int
    tool_id: int
    client_job_id: Optional[str] = None
    comments: Optional[str] = None
    created_at: UtcDateTime


class TransactionResponse(CamelModel):
    """Result of a check-out or check-in: the updated tool and its new log."""
    message: str
    tool: ToolResponse
    log: LogResponse
