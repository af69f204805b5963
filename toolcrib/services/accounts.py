"""User accounts."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from toolcrib.auth import get_password_hash
from toolcrib.exceptions import BadRequestError, ConflictError
from toolcrib.models.user import User, UserRole

logger = logging.getLogger(__name__)


def create_user(
    db: Session,
    name: str,
    email: str,
    worker_id: str,
    password: Optional[str] = None,
    role: UserRole = UserRole.ENGINEER,
) -> User:
    """
    Register a user.
    
    Administrators must have a password; engineers identify themselves by
    worker ID alone and are stored without one.
    """
    if role == UserRole.ADMIN and not password:
        raise BadRequestError("Admins must have a password")
    
    existing = db.query(User).filter(
        (User.email == email) | (User.worker_id == worker_id)
    ).first()
    if existing:
        raise ConflictError("Email or worker ID already registered")
    
    user = User(
        name=name,
        email=email,
        worker_id=worker_id,
        role=role,
        hashed_password=get_password_hash(password) if password else None,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User created: {user.worker_id} ({user.role.value})")
    return user


def ensure_admin(db: Session, name: str, email: str, worker_id: str, password: str) -> User:
    """Create the administrator with this email, or reset it if it exists."""
    taken = db.query(User).filter(User.worker_id == worker_id, User.email != email).first()
    if taken:
        raise ConflictError(
            f"Worker ID {worker_id} already belongs to {taken.name} ({taken.email})"
        )

    admin = db.query(User).filter(User.email == email).first()
    if admin is None:
        admin = User(email=email)
        db.add(admin)
    
    admin.name = name
    admin.worker_id = worker_id
    admin.role = UserRole.ADMIN
    admin.hashed_password = get_password_hash(password)
    db.commit()
    db.refresh(admin)
    return admin
