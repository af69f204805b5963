"""User routes."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from toolcrib.auth import require_admin
from toolcrib.database import get_db
from toolcrib.models.user import User
from toolcrib.schemas.user import UserCreate, UserResponse
from toolcrib.services.accounts import create_user

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/", response_model=List[UserResponse])
async def list_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """List all users (admin only)."""
    return db.query(User).order_by(User.name.asc()).offset(skip).limit(limit).all()


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Create a user (admin only). Password is only required for admins."""
    return create_user(
        db,
        name=user_data.name,
        email=user_data.email,
        worker_id=user_data.worker_id,
        password=user_data.password,
        role=user_data.role,
    )
