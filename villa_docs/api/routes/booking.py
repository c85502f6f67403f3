"""
Booking lookup endpoint.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from ..dependencies import get_booking_service, get_logger
from ..models import ErrorResponse
from ..services.booking_service import BookingService
from ...booking_reference import InvalidSecureIdError
from ...wordpress.client import BookingNotFoundError, WordPressError


router = APIRouter(prefix="/booking", tags=["booking"])


@router.get(
    "",
    summary="Look up a booking",
    description="Resolve a secure booking reference and return the booking fields from WordPress",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)
def get_booking(
    id: Optional[str] = Query(None, description="Secure booking reference"),
    booking_service: BookingService = Depends(get_booking_service),
):
    if not id:
        raise HTTPException(status_code=400, detail="Missing booking ID")
    try:
        return booking_service.lookup(id)
    except InvalidSecureIdError:
        raise HTTPException(status_code=400, detail="Invalid booking ID format")
    except BookingNotFoundError:
        raise HTTPException(status_code=404, detail="Booking not found")
    except WordPressError as e:
        get_logger().error("booking_fetch_failed", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to fetch booking information")
