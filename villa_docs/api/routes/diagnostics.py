"""
Email configuration check.
"""
from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_logger, get_notifier
from ..models import APIResponse, ErrorResponse
from ...guest_communications.notifier import Notifier


router = APIRouter(tags=["diagnostics"])


@router.post("/test-email", response_model=APIResponse, responses={500: {"model": ErrorResponse}})
def send_test_email(notifier: Notifier = Depends(get_notifier)):
    try:
        notifier.send_test_email()
    except Exception as e:
        get_logger().error("test_email_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to send test email")
    return {"success": True, "message": "Test email sent successfully"}
