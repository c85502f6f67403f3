"""
Guest upload link endpoint.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_booking_service, get_logger
from ..models import ErrorResponse, UploadContextResponse
from ..services.booking_service import BookingService
from ...booking_reference import InvalidSecureIdError
from ...wordpress.client import BookingNotFoundError, WordPressError


router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.get(
    "/{secure_booking_id}",
    response_model=UploadContextResponse,
    summary="Resolve a guest upload link",
    description="Booking context for the upload page behind an emailed link",
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)
def get_upload_context(
    secure_booking_id: str,
    email: Optional[str] = Query(None, description="Guest email from the link"),
    booking_service: BookingService = Depends(get_booking_service),
):
    logger = get_logger()
    try:
        return booking_service.get_upload_context(secure_booking_id, email)
    except (InvalidSecureIdError, BookingNotFoundError):
        logger.info("upload_link_rejected", secure_booking_id=secure_booking_id)
        raise HTTPException(status_code=404, detail="Booking not found")
    except WordPressError as e:
        logger.error("upload_link_lookup_failed", secure_booking_id=secure_booking_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch booking information")
