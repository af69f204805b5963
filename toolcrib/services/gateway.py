"""Typed lookups and writes against users, tools and logs."""
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from toolcrib.models.log import Log, LogType
from toolcrib.models.tool import Tool, ToolStatus
from toolcrib.models.user import User


def get_user_by_worker_id(db: Session, worker_id: str) -> Optional[User]:
    return db.query(User).filter(User.worker_id == worker_id).first()


def get_tool_by_qr_id(db: Session, qr_id: str) -> Optional[Tool]:
    return db.query(Tool).filter(Tool.qr_id == qr_id).first()


def get_tool(db: Session, tool_id: int) -> Optional[Tool]:
    return db.query(Tool).filter(Tool.id == tool_id).first()


def latest_log(db: Session, tool_id: int, log_type: Optional[LogType] = None) -> Optional[Log]:
    """Most recent log for a tool, optionally of a single type."""
    query = db.query(Log).options(joinedload(Log.user)).filter(Log.tool_id == tool_id)
    if log_type is not None:
        query = query.filter(Log.type == log_type)
    # Ties on created_at fall back to insertion order
    return query.order_by(Log.created_at.desc(), Log.id.desc()).first()


def recent_logs(db: Session, limit: int) -> List[Log]:
    """Newest logs across all tools, with tool and user loaded."""
    return (
        db.query(Log)
        .options(joinedload(Log.tool), joinedload(Log.user))
        .order_by(Log.created_at.desc(), Log.id.desc())
        .limit(limit)
        .all()
    )


def transition_status(db: Session, tool_id: int, expected: ToolStatus, new: ToolStatus) -> bool:
    """
    Move a tool from ``expected`` to ``new`` status.
    
    The update only matches while the row still holds ``expected``, so two
    requests racing for the same tool cannot both win. Returns False when no
    row was changed. Does not commit.
    """
    updated = (
        db.query(Tool)
        .filter(Tool.id == tool_id, Tool.status == expected)
        .update({Tool.status: new}, synchronize_session=False)
    )
    return updated == 1
