"""
Document reminder scheduler.
"""
from datetime import datetime
import structlog
from typing import Iterable, List, Optional

from ...guest_communications.notifier import Notifier
from ...utils.logger import ReminderLogger
from ...utils.models import Booking, ReminderResult
from ...wordpress.client import WordPressClient
from config.settings import AppConfig, app_config

SECONDS_PER_DAY = 24 * 60 * 60


class ReminderService:
    """Selects bookings that are about a week out and asks their guests for documents.

    Nothing is recorded about sent reminders. A second run inside the same
    window emails the same guests again.
    """

    def __init__(
        self,
        wordpress_client: WordPressClient,
        notifier: Notifier,
        logger: structlog.BoundLogger,
        config: Optional[AppConfig] = None,
    ):
        self.wordpress_client = wordpress_client
        self.notifier = notifier
        self.logger = logger
        self.reminder_logger = ReminderLogger(logger)
        self.config = config or app_config

    def days_until_check_in(self, booking: Booking, now: datetime) -> Optional[float]:
        if not booking.check_in_date:
            return None
        return (booking.check_in_date - now).total_seconds() / SECONDS_PER_DAY

    def needs_reminder(self, booking: Booking, now: datetime) -> bool:
        """True if the booking has no documents and checks in inside the reminder window."""
        if booking.has_uploaded_documents:
            return False
        days = self.days_until_check_in(booking, now)
        if days is None:
            self.logger.warning("booking_without_check_in", booking_id=booking.booking_id)
            return False
        return self.config.reminder_window_start < days < self.config.reminder_window_end

    def select_bookings(self, bookings: Iterable[Booking], now: Optional[datetime] = None) -> List[Booking]:
        now = now or datetime.now()
        selected = []
        for booking in bookings:
            is_due = self.needs_reminder(booking, now)
            self.reminder_logger.log_booking_checked(booking.booking_id, is_due)
            if is_due:
                selected.append(booking)
        return selected

    def send_reminders(self, bookings: Iterable[Booking]) -> ReminderResult:
        """Send the document request email to each booking, counting outcomes."""
        result = ReminderResult()
        for booking in bookings:
            result.processed += 1
            if self.notifier.send_document_request(booking):
                result.sent += 1
                self.reminder_logger.log_reminder_sent(booking.booking_id, booking.guest_email)
            else:
                result.failed += 1
                self.reminder_logger.log_reminder_failed(booking.booking_id)
        return result

    def process_document_reminders(
        self,
        bookings: Optional[Iterable[Booking]] = None,
        now: Optional[datetime] = None,
        dry_run: bool = False,
    ) -> ReminderResult:
        """
        Run one reminder pass.

        Args:
            bookings: Upcoming bookings; fetched from WordPress when omitted
            now: Reference time for the window, defaults to the current time
            dry_run: Select bookings without sending anything

        Returns:
            Processed, sent and failed counts

        Raises:
            WordPressError: If the booking list cannot be fetched
        """
        if bookings is None:
            bookings = self.wordpress_client.get_upcoming_bookings()

        due = self.select_bookings(bookings, now)
        self.logger.info("bookings_needing_reminders", count=len(due), dry_run=dry_run)

        if dry_run:
            return ReminderResult(processed=len(due))

        result = self.send_reminders(due)
        self.logger.info("document_reminders_processed", **result.to_dict())
        return result
