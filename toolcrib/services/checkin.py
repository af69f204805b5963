"""Check-in workflow: the holder returns a tool to the showroom."""
import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from toolcrib.config import settings
from toolcrib.exceptions import ConflictError, ForbiddenError, NotFoundError
from toolcrib.models.log import Log, LogType
from toolcrib.models.tool import Tool, ToolStatus
from toolcrib.services import gateway

logger = logging.getLogger(__name__)

AVAILABLE_MESSAGE = "This tool was already available (in the showroom)"


def check_in(
    db: Session,
    qr_id: str,
    worker_id: str,
    comments: Optional[str] = None,
) -> Tuple[Tool, Log]:
    """
    Return a tool. Only the worker who checked it out may return it.
    
    The holder is the user of the tool's latest CHECK_OUT log. Check-outs
    only succeed from AVAILABLE, so two CHECK_OUT logs are never written
    without a CHECK_IN between them.
    """
    user = gateway.get_user_by_worker_id(db, worker_id)
    if not user:
        raise NotFoundError("Worker ID not found")
    
    tool = gateway.get_tool_by_qr_id(db, qr_id)
    if not tool:
        raise NotFoundError("Tool not found")
    
    if tool.status == ToolStatus.AVAILABLE:
        raise ConflictError(AVAILABLE_MESSAGE)
    
    last_checkout = gateway.latest_log(db, tool.id, LogType.CHECK_OUT)
    if last_checkout and last_checkout.user_id != user.id:
        holder = last_checkout.user
        logger.warning(
            f"Check-in of {tool.qr_id} by {worker_id} refused: held by {holder.worker_id}"
        )
        raise ForbiddenError(
            f"This tool was checked out by {holder.name} (ID: {holder.worker_id}). "
            f"Only they can return it."
        )
    
    try:
        if not gateway.transition_status(db, tool.id, ToolStatus.IN_USE, ToolStatus.AVAILABLE):
            raise ConflictError(AVAILABLE_MESSAGE)
        
        log = Log(
            type=LogType.CHECK_IN,
            user_id=user.id,
            tool_id=tool.id,
            client_job_id=settings.SHOWROOM_LOCATION,
            comments=comments or None,
        )
        db.add(log)
        db.commit()
    except Exception:
        db.rollback()
        raise
    
    db.refresh(tool)
    db.refresh(log)
    logger.info(f"Tool {tool.qr_id} checked in by {user.worker_id}")
    return tool, log
