"""Check-out/check-in log model."""
import enum
from sqlalchemy import Column, Integer, String, Text, Enum, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship

from toolcrib.database import Base, utcnow


class LogType(str, enum.Enum):
    """Log entry types."""
    CHECK_OUT = "CHECK_OUT"
    CHECK_IN = "CHECK_IN"


class Log(Base):
    """
    Append-only record of a tool leaving or returning to the showroom.
    
    The current holder of a checked-out tool is not stored anywhere; it is
    the user of the tool's most recent CHECK_OUT entry.
    """
    __tablename__ = "logs"
    __table_args__ = (
        Index("ix_logs_tool_type_created", "tool_id", "type", "created_at"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    type = Column(Enum(LogType), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tool_id = Column(Integer, ForeignKey("tools.id"), nullable=False, index=True)
    
    # Client or job name on check-out, the showroom on check-in
    client_job_id = Column(String(255), nullable=True)
    comments = Column(Text, nullable=True)
    
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    
    # Relationships
    user = relationship("User", back_populates="logs")
    tool = relationship("Tool", back_populates="logs")
