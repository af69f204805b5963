"""User model and role enumeration."""
import enum
from sqlalchemy import Column, Integer, String, Enum, DateTime
from sqlalchemy.orm import relationship

from toolcrib.database import Base, utcnow


class UserRole(str, enum.Enum):
    """User roles. Only administrators carry a password."""
    ADMIN = "ADMIN"
    ENGINEER = "ENGINEER"


class User(Base):
    """A worker who scans tools in and out, or an administrator."""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    worker_id = Column(String(50), unique=True, index=True, nullable=False)
    role = Column(Enum(UserRole), default=UserRole.ENGINEER, nullable=False)
    hashed_password = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    
    # Relationships
    logs = relationship("Log", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, worker_id='{self.worker_id}', role='{self.role}')>"
