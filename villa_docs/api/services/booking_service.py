"""
Booking service for resolving secure booking references and listing bookings for the admin panel.
"""
from typing import Any, Dict, List, Optional

from ...booking_reference import parse_secure_id
from ...utils.models import Booking
from ...wordpress.client import WordPressClient


class BookingService:
    """Service for handling booking lookups against WordPress."""

    def __init__(self, wordpress_client: WordPressClient, logger):
        self.wordpress_client = wordpress_client
        self.logger = logger

    def lookup(self, secure_id: str) -> Dict[str, Any]:
        """
        Fetch booking fields for a secure booking reference.

        Raises:
            InvalidSecureIdError: If the reference does not parse
            BookingNotFoundError: If WordPress does not know the booking
            WordPressError: If the booking API fails
        """
        ref = parse_secure_id(secure_id)
        self.logger.info("booking_lookup",
                         booking_id=ref.booking_id,
                         check_in=ref.check_in,
                         check_out=ref.check_out)
        return self.wordpress_client.get_booking(ref.booking_id)

    def get_upload_context(self, secure_id: str, email: Optional[str] = None) -> Dict[str, Any]:
        """Booking details shown on the guest upload page."""
        booking = Booking.from_api(self.lookup(secure_id))
        context = booking.to_dict()
        context["secureBookingId"] = secure_id
        context["email"] = email or booking.guest_email or ""
        return context

    def list_bookings(
        self,
        status: str = "all",
        documents: str = "all",
        search: Optional[str] = None,
    ) -> List[Booking]:
        """Upcoming bookings filtered the way the admin panel asks for them."""
        bookings = self.wordpress_client.get_upcoming_bookings()
        return filter_bookings(bookings, status=status, documents=documents, search=search)


def filter_bookings(
    bookings: List[Booking],
    status: str = "all",
    documents: str = "all",
    search: Optional[str] = None,
) -> List[Booking]:
    term = (search or "").strip().lower()
    result = []
    for booking in bookings:
        if status != "all" and booking.status != status:
            continue
        if documents == "with" and not booking.has_uploaded_documents:
            continue
        if documents == "without" and booking.has_uploaded_documents:
            continue
        if term and not any(
            term in (value or "").lower()
            for value in (booking.guest_name, booking.guest_email, booking.booking_id)
        ):
            continue
        result.append(booking)
    return result
