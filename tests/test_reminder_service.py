"""
Unit tests for the document reminder scheduler.
"""
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from villa_docs.api.services.reminder_service import ReminderService
from villa_docs.utils.models import Booking
from villa_docs.wordpress.client import WordPressError

pytestmark = pytest.mark.unit

NOW = datetime(2025, 8, 1, 9, 30)


def make_booking(booking_id="870", days=7.0, uploaded=False):
    return Booking(
        booking_id=booking_id,
        guest_name="John Doe",
        guest_email=f"guest{booking_id}@example.com",
        check_in_date=NOW + timedelta(days=days),
        has_uploaded_documents=uploaded,
    )


class TestReminderService:
    """Test cases for ReminderService."""

    @pytest.fixture
    def notifier(self):
        notifier = Mock()
        notifier.send_document_request.return_value = True
        return notifier

    @pytest.fixture
    def wordpress_client(self):
        return Mock()

    @pytest.fixture
    def service(self, wordpress_client, notifier):
        return ReminderService(wordpress_client, notifier, Mock())

    def test_booking_seven_days_out_is_reminded(self, service, notifier):
        booking = make_booking(days=7.0)

        result = service.process_document_reminders(bookings=[booking], now=NOW)

        assert result.to_dict() == {"processed": 1, "sent": 1, "failed": 0}
        notifier.send_document_request.assert_called_once_with(booking)

    def test_booking_with_documents_is_skipped(self, service, notifier):
        result = service.process_document_reminders(bookings=[make_booking(uploaded=True)], now=NOW)

        assert result.to_dict() == {"processed": 0, "sent": 0, "failed": 0}
        notifier.send_document_request.assert_not_called()

    @pytest.mark.parametrize("days,expected", [
        (6.4, False),
        (6.5, False),
        (6.51, True),
        (7.49, True),
        (7.5, False),
        (8.0, False),
        (-7.0, False),
    ])
    def test_reminder_window(self, service, days, expected):
        assert service.needs_reminder(make_booking(days=days), NOW) is expected

    def test_booking_without_check_in_is_skipped(self, service):
        booking = Booking(booking_id="1", guest_email="a@example.com")

        assert service.needs_reminder(booking, NOW) is False

    def test_offset_check_in_is_compared_in_local_time(self, service, notifier):
        check_in = (datetime.now(timezone.utc) + timedelta(days=7)).isoformat()
        bookings = [Booking.from_api({"id": 1, "guestEmail": "a@example.com", "checkInDate": check_in})]

        result = service.process_document_reminders(bookings=bookings)

        assert result.sent == 1

    def test_malformed_check_in_skips_only_that_booking(self, service, notifier):
        broken = Booking.from_api({"id": 1, "guestEmail": "a@example.com", "checkInDate": "2025-13-45"})
        due = make_booking("2")

        result = service.process_document_reminders(bookings=[broken, due], now=NOW)

        assert result.to_dict() == {"processed": 1, "sent": 1, "failed": 0}
        notifier.send_document_request.assert_called_once_with(due)
        service.logger.warning.assert_called_once_with("booking_without_check_in", booking_id="1")

    def test_counts_failed_sends(self, service, notifier):
        notifier.send_document_request.side_effect = [True, False, True]
        bookings = [make_booking(str(i)) for i in range(3)]

        result = service.process_document_reminders(bookings=bookings, now=NOW)

        assert result.to_dict() == {"processed": 3, "sent": 2, "failed": 1}
        assert service.reminder_logger.stats["reminders_failed"] == 1

    def test_fetches_upcoming_bookings(self, service, wordpress_client, notifier):
        wordpress_client.get_upcoming_bookings.return_value = [make_booking("1"), make_booking("2", days=3)]

        result = service.process_document_reminders(now=NOW)

        wordpress_client.get_upcoming_bookings.assert_called_once()
        assert result.processed == 1
        assert notifier.send_document_request.call_count == 1

    def test_fetch_failure_propagates(self, service, wordpress_client):
        wordpress_client.get_upcoming_bookings.side_effect = WordPressError("down")

        with pytest.raises(WordPressError):
            service.process_document_reminders(now=NOW)

    def test_dry_run_sends_nothing(self, service, notifier):
        result = service.process_document_reminders(bookings=[make_booking()], now=NOW, dry_run=True)

        assert result.processed == 1
        assert result.sent == 0
        notifier.send_document_request.assert_not_called()

    def test_second_run_in_window_sends_again(self, service, notifier):
        bookings = [make_booking()]

        service.process_document_reminders(bookings=bookings, now=NOW)
        service.process_document_reminders(bookings=bookings, now=NOW + timedelta(hours=2))

        assert notifier.send_document_request.call_count == 2

    def test_send_reminders_ignores_window(self, service, notifier):
        result = service.send_reminders([make_booking(days=30)])

        assert result.sent == 1
        notifier.send_document_request.assert_called_once()
