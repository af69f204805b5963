"""Tool model."""
import enum
from sqlalchemy import Column, Integer, String, Enum, DateTime, Boolean
from sqlalchemy.orm import relationship

from toolcrib.database import Base, utcnow


class ToolStatus(str, enum.Enum):
    """Stored tool status. Calibration lapse is computed, never stored."""
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"


class Tool(Base):
    """Tool model - a physical tool identified by the QR code on its label."""
    __tablename__ = "tools"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    qr_id = Column(String(100), unique=True, index=True, nullable=False)
    status = Column(Enum(ToolStatus), default=ToolStatus.AVAILABLE, nullable=False)
    
    # Calibration tracking
    is_calibration_tool = Column(Boolean, default=False, nullable=False)
    next_calibration_date = Column(DateTime, nullable=True)
    
    # Timestamps
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, onupdate=utcnow)
    
    # Relationships
    logs = relationship("Log", back_populates="tool")
