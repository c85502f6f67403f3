# guest_communications/notifier.py
from datetime import datetime
from typing import Optional
from urllib.parse import quote

from . import templates
from .email_client import EmailClient
from ..booking_reference import build_secure_id
from ..utils.logger import get_logger
from ..utils.models import Booking, UploadSubmission
from config.settings import app_config


def build_upload_link(booking: Booking, base_url: Optional[str] = None) -> str:
    """Guest upload link carrying the secure booking reference and email."""
    base = (base_url or app_config.public_base_url).rstrip("/")
    secure_id = build_secure_id(booking.booking_id, booking.check_in_date, booking.check_out_date)
    return f"{base}/uploads/{secure_id}?email={quote(booking.guest_email or '', safe='')}"


class Notifier:
    def __init__(self, email_client: Optional[EmailClient] = None):
        self.email = email_client or EmailClient()
        self.logger = get_logger("notifier")

    @property
    def admin_email(self) -> str:
        return self.email.config.admin_email

    def send_upload_notification(self, submission: UploadSubmission) -> bool:
        """Email the uploaded documents to the administrator.

        Failures are logged and reported through the return value only, the
        guest-facing upload does not depend on delivery.
        """
        try:
            attachments = [(f.attachment_name, f.content, f.content_type) for f in submission.files]
            self.email.send(
                to=self.admin_email,
                subject=f"[Villa Claudia] Travel Documents Uploaded - Booking {submission.booking_id}",
                body=templates.upload_notification(submission),
                html=True,
                attachments=attachments,
            )
            self.logger.info("upload_notification_sent",
                             booking_id=submission.booking_id,
                             files=len(submission.files))
            return True
        except Exception as e:
            self.logger.error("upload_notification_failed",
                              booking_id=submission.booking_id,
                              error=str(e),
                              error_type=type(e).__name__,
                              smtp_server=self.email.smtp_server,
                              smtp_port=self.email.smtp_port)
            return False

    def send_document_request(self, booking: Booking) -> bool:
        """Send the upload reminder for a booking to its guest."""
        try:
            if not booking.guest_email:
                raise ValueError("Booking has no guest email")
            if not booking.check_in_date:
                raise ValueError("Booking has no check-in date")
            link = build_upload_link(booking)
            self.email.send(
                to=booking.guest_email,
                subject="Important: Upload Your Travel Documents - Villa Claudia",
                body=templates.document_request(booking.guest_name, booking.check_in_date, link),
                html=True,
            )
            self.logger.info("document_request_sent", booking_id=booking.booking_id)
            return True
        except Exception as e:
            self.logger.error("document_request_failed",
                              booking_id=booking.booking_id,
                              error=str(e))
            return False

    def send_magic_link(self, to: str, name: Optional[str], link: str, valid_hours: int = 24):
        self.email.send(
            to=to,
            subject="Document Upload Request - Villa Claudia",
            body=templates.magic_link(name, link, valid_hours),
            html=True,
        )
        self.logger.info("magic_link_sent", email=to)

    def send_test_email(self):
        self.email.send(
            to=self.admin_email,
            subject="Test Email from Villa Claudia Document Upload System",
            body=templates.configuration_check(datetime.now()),
            html=True,
        )
        self.logger.info("test_email_sent", to=self.admin_email)
