"""
Admin panel endpoints, gated by the shared admin password.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_auth_service, get_booking_service, get_logger, get_reminder_service, require_admin
from ..models import (
    APIResponse, AdminLoginRequest, BookingListResponse, ErrorResponse,
    SendRemindersRequest, SendRemindersResponse,
)
from ..services.auth_service import AuthService
from ..services.booking_service import BookingService
from ..services.reminder_service import ReminderService
from ...wordpress.client import WordPressError


router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/login", response_model=APIResponse, responses={401: {"model": ErrorResponse}})
def login(req: AdminLoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    if not auth_service.check_admin_password(req.password):
        get_logger().info("admin_login_failed")
        raise HTTPException(status_code=401, detail="Invalid password")
    return {"success": True, "message": "Authenticated"}


@router.get(
    "/bookings",
    response_model=BookingListResponse,
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_bookings(
    status: str = Query("all", description="Booking status or 'all'"),
    documents: str = Query("all", pattern="^(all|with|without)$", description="Document upload filter"),
    search: Optional[str] = Query(None, description="Guest name, email or booking id"),
    booking_service: BookingService = Depends(get_booking_service),
):
    try:
        bookings = booking_service.list_bookings(status=status, documents=documents, search=search)
    except WordPressError as e:
        get_logger().error("admin_bookings_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to load bookings")
    return {
        "success": True,
        "message": f"{len(bookings)} bookings",
        "data": [b.to_dict() for b in bookings],
    }


@router.post(
    "/send-reminders",
    response_model=SendRemindersResponse,
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def send_reminders(
    req: Optional[SendRemindersRequest] = None,
    booking_service: BookingService = Depends(get_booking_service),
    reminder_service: ReminderService = Depends(get_reminder_service),
):
    """Ask every upcoming guest without documents to upload them, ignoring the reminder window."""
    try:
        pending = booking_service.list_bookings(documents="without")
    except WordPressError as e:
        get_logger().error("admin_reminders_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to send reminders")

    if req and req.bookingIds:
        wanted = set(req.bookingIds)
        pending = [b for b in pending if b.booking_id in wanted]

    if not pending:
        return {
            "success": True,
            "message": "No reminders needed, all guests have uploaded documents",
            "sent": 0,
            "total": 0,
        }

    result = reminder_service.send_reminders(pending)
    return {
        "success": True,
        "message": f"Sent {result.sent} of {result.processed} reminders successfully",
        "sent": result.sent,
        "total": result.processed,
    }
