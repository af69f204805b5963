"""Effective tool status.

A tool's stored status only says whether it is in the showroom or out on a
job. Whether its calibration has lapsed is worked out on every read from
``next_calibration_date``, so renewing the date takes effect immediately and
nothing has to "un-expire" a tool.
"""
import enum
from datetime import datetime
from typing import Optional

from toolcrib.database import utcnow
from toolcrib.models.tool import Tool


class EffectiveStatus(str, enum.Enum):
    """Status shown to users."""
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    IN_CALIBRATION = "IN_CALIBRATION"


def is_calibration_expired(tool: Tool, now: datetime) -> bool:
    """True when a calibration tool's next calibration date is in the past."""
    return bool(
        tool.is_calibration_tool
        and tool.next_calibration_date is not None
        and tool.next_calibration_date < now
    )


def effective_status(tool: Tool, now: Optional[datetime] = None) -> EffectiveStatus:
    """Stored status, overridden by IN_CALIBRATION once calibration lapses."""
    if now is None:
        now = utcnow()
    if is_calibration_expired(tool, now):
        return EffectiveStatus.IN_CALIBRATION
    return EffectiveStatus(tool.status)


def checkout_block_reason(tool: Tool, now: datetime) -> Optional[str]:
    """
    Message explaining why calibration keeps the tool in the showroom.
    
    Calibration tools without an assigned date are never allowed out.
    Returns None when the tool may be checked out.
    """
    if not tool.is_calibration_tool:
        return None
    
    if tool.next_calibration_date is None:
        return (
            f"BLOCKED: {tool.name} is a calibration tool and has no next "
            f"calibration date assigned. Contact administration."
        )
    
    if tool.next_calibration_date < now:
        expired_on = tool.next_calibration_date.strftime("%Y-%m-%d")
        return (
            f"BLOCKED: calibration of {tool.name} expired on {expired_on}. "
            f"It must go to the lab."
        )
    
    return None
