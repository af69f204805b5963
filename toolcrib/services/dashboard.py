"""Read-only dashboard and history views."""
import math
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from toolcrib.config import settings
from toolcrib.database import utcnow
from toolcrib.models.tool import Tool, ToolStatus
from toolcrib.schemas.dashboard import DashboardRow, DashboardSummary, HistoryRow
from toolcrib.services import gateway
from toolcrib.services.status import EffectiveStatus, effective_status

NO_VALUE = "---"
NEEDS_CALIBRATION = "Requires calibration"


def days_until(due: Optional[datetime], now: datetime) -> Optional[int]:
    """Whole days left before ``due``, rounded up; negative once it has passed."""
    if due is None:
        return None
    return math.ceil((due - now).total_seconds() / 86400)


def dashboard_rows(
    db: Session,
    now: Optional[datetime] = None,
    status: Optional[EffectiveStatus] = None,
    search: Optional[str] = None,
) -> List[DashboardRow]:
    """
    One row per tool, ordered by name.
    
    Each tool is joined with its most recent log of either type to show who
    has it and where. Tools in the showroom always report the showroom as
    their location. ``search`` matches name or QR id, ignoring case.
    """
    if now is None:
        now = utcnow()
    
    query = db.query(Tool)
    if search:
        search_term = f"%{search}%"
        query = query.filter(
            (Tool.name.ilike(search_term)) |
            (Tool.qr_id.ilike(search_term))
        )
    
    rows = []
    for tool in query.order_by(Tool.name.asc()).all():
        current = effective_status(tool, now)
        if status is not None and current != status:
            continue
        
        last_log = gateway.latest_log(db, tool.id)
        last_user = last_log.user.name if last_log and last_log.user else None
        
        if tool.status == ToolStatus.IN_USE:
            who = last_user or NO_VALUE
            where = (last_log.client_job_id if last_log else None) or NO_VALUE
        else:
            if current == EffectiveStatus.IN_CALIBRATION:
                who = NEEDS_CALIBRATION
            else:
                who = last_user or NO_VALUE
            where = settings.SHOWROOM_LOCATION
        
        rows.append(DashboardRow(
            id=tool.id,
            name=tool.name,
            qr_id=tool.qr_id,
            status=tool.status,
            effective_status=current,
            is_calibration_tool=tool.is_calibration_tool,
            next_calibration_date=tool.next_calibration_date,
            days_until_calibration=days_until(tool.next_calibration_date, now),
            timestamp=last_log.created_at if last_log else None,
            who=who,
            where=where,
        ))
    
    return rows


def dashboard_summary(rows: List[DashboardRow]) -> DashboardSummary:
    """Count dashboard rows by effective status."""
    summary = DashboardSummary(total=len(rows))
    for row in rows:
        if row.effective_status == EffectiveStatus.AVAILABLE:
            summary.available += 1
        elif row.effective_status == EffectiveStatus.IN_USE:
            summary.in_use += 1
        else:
            summary.in_calibration += 1
    return summary


def history_rows(db: Session, limit: Optional[int] = None) -> List[HistoryRow]:
    """Newest log entries across all tools, capped at HISTORY_LIMIT."""
    if limit is None or limit > settings.HISTORY_LIMIT:
        limit = settings.HISTORY_LIMIT
    
    return [
        HistoryRow(
            id=log.id,
            tool_name=log.tool.name,
            tool_qr_id=log.tool.qr_id,
            action=log.type,
            user_name=log.user.name or "Unknown user",
            user_worker_id=log.user.worker_id,
            client_name=log.client_job_id or NO_VALUE,
            comments=log.comments or None,
            timestamp=log.created_at,
        )
        for log in gateway.recent_logs(db, limit)
    ]
