"""Calibration renewal."""
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from toolcrib.exceptions import NotFoundError
from toolcrib.models.tool import Tool
from toolcrib.services import gateway

logger = logging.getLogger(__name__)


def renew_calibration(db: Session, tool_id: int, next_calibration_date: datetime) -> Tool:
    """Set a tool's next calibration date. The stored status is left alone."""
    tool = gateway.get_tool(db, tool_id)
    if not tool:
        raise NotFoundError("Tool not found")
    
    tool.next_calibration_date = next_calibration_date
    db.commit()
    db.refresh(tool)
    logger.info(f"Calibration of {tool.qr_id} renewed until {next_calibration_date:%Y-%m-%d}")
    return tool
