"""Dashboard and history schemas."""
from typing import Optional

from toolcrib.models.log import LogType
from toolcrib.models.tool import ToolStatus
from toolcrib.schemas.base import CamelModel, UtcDateTime
from toolcrib.services.status import EffectiveStatus


class DashboardRow(CamelModel):
    """One tool with its effective status and latest movement."""
    id: int
    name: str
    qr_id: str
    status: ToolStatus
    effective_status: EffectiveStatus
    is_calibration_tool: bool
    next_calibration_date: Optional[UtcDateTime] = None
    days_until_calibration: Optional[int] = None
    timestamp: Optional[UtcDateTime] = None
    who: str
    where: str


class DashboardSummary(CamelModel):
    """Tool counts by effective status."""
    total: int = 0
    available: int = 0
    in_use: int = 0
    in_calibration: int = 0


class HistoryRow(CamelModel):
    """A log entry with tool and user names filled in for display."""
    id: int
    tool_name: str
    tool_qr_id: str
    action: LogType
    user_name: str
    user_worker_id: str
    client_name: str
    comments: Optional[str] = None
    timestamp: UtcDateTime
