"""Check-out workflow: a worker takes a tool out to a client or job."""
import logging
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from toolcrib.database import utcnow
from toolcrib.exceptions import ConflictError, ForbiddenError, NotFoundError
from toolcrib.models.log import Log, LogType
from toolcrib.models.tool import Tool, ToolStatus
from toolcrib.services import gateway
from toolcrib.services.status import checkout_block_reason

logger = logging.getLogger(__name__)

IN_USE_MESSAGE = "This tool is already in use"


def check_out(
    db: Session,
    qr_id: str,
    worker_id: str,
    client_name: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Tuple[Tool, Log]:
    """
    Hand a tool out to a worker.
    
    The CHECK_OUT log and the status change are committed together; if
    either fails, neither is kept.
    """
    if now is None:
        now = utcnow()
    
    user = gateway.get_user_by_worker_id(db, worker_id)
    if not user:
        raise NotFoundError("Worker ID not found")
    
    tool = gateway.get_tool_by_qr_id(db, qr_id)
    if not tool:
        raise NotFoundError("Tool not found")
    
    if tool.status == ToolStatus.IN_USE:
        raise ConflictError(IN_USE_MESSAGE)
    
    reason = checkout_block_reason(tool, now)
    if reason:
        logger.warning(f"Check-out of {tool.qr_id} by {worker_id} refused: calibration")
        raise ForbiddenError(reason)
    
    try:
        if not gateway.transition_status(db, tool.id, ToolStatus.AVAILABLE, ToolStatus.IN_USE):
            raise ConflictError(IN_USE_MESSAGE)
        
        log = Log(
            type=LogType.CHECK_OUT,
            user_id=user.id,
            tool_id=tool.id,
            client_job_id=client_name,
        )
        db.add(log)
        db.commit()
    except Exception:
        db.rollback()
        raise
    
    db.refresh(tool)
    db.refresh(log)
    logger.info(f"Tool {tool.qr_id} checked out by {user.worker_id} to {client_name}")
    return tool, log
