"""Check-out and check-in routes.

These are used from the shop-floor scanner and are not behind a sign-in;
the worker ID in the request is the only attribution.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from toolcrib.database import get_db
from toolcrib.models.log import Log
from toolcrib.models.tool import Tool
from toolcrib.schemas.log import CheckinRequest, CheckoutRequest, LogResponse, TransactionResponse
from toolcrib.schemas.tool import ToolResponse
from toolcrib.services.checkin import check_in
from toolcrib.services.checkout import check_out

router = APIRouter(tags=["Check-out / Check-in"])


@router.post("/checkout", response_model=TransactionResponse)
async def checkout_tool(
    request: CheckoutRequest,
    db: Session = Depends(get_db)
):
    """Check a tool out to a client or job."""
    tool, log = check_out(db, request.qr_id, request.worker_id, request.client_name)
    return _response("Check-out successful", tool, log)


@router.post("/checkin", response_model=TransactionResponse)
async def checkin_tool(
    request: CheckinRequest,
    db: Session = Depends(get_db)
):
    """Return a tool to the showroom."""
    tool, log = check_in(db, request.qr_id, request.worker_id, request.comments)
    return _response("Check-in successful", tool, log)


def _response(message: str, tool: Tool, log: Log) -> TransactionResponse:
    return TransactionResponse(
        message=message,
        tool=ToolResponse.model_validate(tool),
        log=LogResponse.model_validate(log),
    )
