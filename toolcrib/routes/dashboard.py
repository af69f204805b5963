"""Dashboard and history routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from toolcrib.auth import require_admin
from toolcrib.database import get_db
from toolcrib.models.user import User
from toolcrib.schemas.dashboard import DashboardRow, DashboardSummary, HistoryRow
from toolcrib.services.dashboard import dashboard_rows, dashboard_summary, history_rows
from toolcrib.services.status import EffectiveStatus

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard", response_model=List[DashboardRow])
async def get_dashboard(
    status: Optional[EffectiveStatus] = Query(None, description="Filter by effective status"),
    search: Optional[str] = Query(None, description="Search by name or QR ID"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Every tool with its effective status and who has it where."""
    return dashboard_rows(db, status=status, search=search)


@router.get("/dashboard/summary", response_model=DashboardSummary)
async def get_dashboard_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Tool counts by effective status."""
    return dashboard_summary(dashboard_rows(db))


@router.get("/history", response_model=List[HistoryRow])
async def get_history(
    limit: int = Query(100, ge=1, description="Number of entries (capped at 100)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Most recent check-outs and check-ins across all tools."""
    return history_rows(db, limit)
