"""Authentication routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from toolcrib.auth import authenticate_admin, create_access_token, require_admin
from toolcrib.database import get_db
from toolcrib.models.user import User
from toolcrib.schemas.user import LoginRequest, Token, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=Token)
async def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db)
):
    """Sign in as an administrator and receive a bearer token."""
    user = authenticate_admin(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    access_token = create_access_token(
        data={"sub": user.email, "role": user.role.value}
    )
    logger.info(f"Administrator signed in: {user.email}")
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=UserResponse)
async def read_current_user(current_user: User = Depends(require_admin)):
    """Get the signed-in administrator."""
    return current_user
