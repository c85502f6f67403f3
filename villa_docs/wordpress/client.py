"""
Client for the Villa Claudia WordPress plugin's booking REST API.
"""
from typing import Any, Dict, List, Optional

import requests

from ..utils.logger import get_logger
from ..utils.models import Booking
from config.settings import WordPressConfig, wordpress_config


class WordPressError(RuntimeError):
    """Raised when the booking API is unreachable or answers with an error."""


class BookingNotFoundError(WordPressError):
    """Raised when the booking API does not know a booking id."""


class WordPressClient:
    """Read-only access to MotoPress bookings exposed by the WordPress plugin."""

    def __init__(self, config: Optional[WordPressConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or wordpress_config
        self.session = session or requests.Session()
        self.logger = get_logger("wordpress_client")

    def _get(self, path: str) -> Any:
        if not self.config.api_url:
            raise WordPressError("WORDPRESS_API_URL is not configured")

        url = f"{self.config.api_url.rstrip('/')}/{path.lstrip('/')}"
        try:
            response = self.session.get(
                url,
                headers={"x-api-key": self.config.api_key, "Content-Type": "application/json"},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            self.logger.error("wordpress_request_failed", url=url, error=str(e))
            raise WordPressError(f"Failed to reach booking API: {e}") from e

        if response.status_code == 404:
            raise BookingNotFoundError(f"Not found: {path}")
        if not response.ok:
            self.logger.error("wordpress_api_error", url=url, status=response.status_code, body=response.text[:500])
            raise WordPressError(f"Failed to fetch booking data ({response.status_code})")

        try:
            return response.json()
        except ValueError as e:
            raise WordPressError("Booking API returned invalid JSON") from e

    def get_booking(self, booking_id: str) -> Dict[str, Any]:
        """Raw booking fields as returned by the plugin."""
        return self._get(f"booking/{booking_id}")

    def has_documents(self, booking_id: str) -> bool:
        data = self._get(f"has-documents/{booking_id}")
        return bool(data.get("hasDocuments"))

    def get_upcoming_bookings(self, with_document_status: bool = True) -> List[Booking]:
        """
        Bookings checking in within the next two weeks.

        Args:
            with_document_status: Look up whether each booking already has documents

        Returns:
            List of bookings
        """
        data = self._get("bookings/upcoming") or []
        bookings = [Booking.from_api(item) for item in data]
        if with_document_status:
            for booking in bookings:
                booking.has_uploaded_documents = self.has_documents(booking.booking_id)
        self.logger.info("upcoming_bookings_fetched", count=len(bookings))
        return bookings

    def ping(self) -> Dict[str, Any]:
        return self._get("ping")
