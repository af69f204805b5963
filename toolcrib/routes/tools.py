"""Tool routes."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from toolcrib.auth import require_admin
from toolcrib.database import get_db
from toolcrib.models.user import User
from toolcrib.models.tool import Tool, ToolStatus
from toolcrib.schemas.tool import CalibrationRenewal, ToolCreate, ToolResponse
from toolcrib.services.calibration import renew_calibration

router = APIRouter(prefix="/tools", tags=["Tools"])


@router.get("/", response_model=List[ToolResponse])
async def list_tools(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """List all tools (admin only)."""
    return db.query(Tool).order_by(Tool.name.asc()).offset(skip).limit(limit).all()


@router.post("/", response_model=ToolResponse, status_code=status.HTTP_201_CREATED)
async def create_tool(
    tool_data: ToolCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Register a new tool (admin only). New tools start in the showroom."""
    # Check if QR code is unique
    existing = db.query(Tool).filter(Tool.qr_id == tool_data.qr_id).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"A tool with QR ID {tool_data.qr_id} already exists"
        )
    
    db_tool = Tool(**tool_data.model_dump(), status=ToolStatus.AVAILABLE)
    db.add(db_tool)
    db.commit()
    db.refresh(db_tool)
    return db_tool


@router.get("/{tool_id}", response_model=ToolResponse)
async def get_tool(
    tool_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Get a specific tool."""
    tool = db.query(Tool).filter(Tool.id == tool_id).first()
    if not tool:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tool not found"
        )
    return tool


@router.patch("/{tool_id}", response_model=ToolResponse)
async def update_calibration(
    tool_id: int,
    renewal: CalibrationRenewal,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    """Renew a tool's calibration date (admin only)."""
    return renew_calibration(db, tool_id, renewal.next_calibration_date)
