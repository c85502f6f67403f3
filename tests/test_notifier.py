"""
Unit tests for email delivery and notification templates.
"""
import pytest
from datetime import datetime
from unittest.mock import Mock, patch

from config.settings import EmailConfig
from villa_docs.guest_communications.email_client import EmailClient, EmailConfigError
from villa_docs.guest_communications.notifier import Notifier, build_upload_link
from villa_docs.guest_communications.templates import format_file_size, upload_notification
from villa_docs.utils.models import Booking, Traveler, UploadedFile, UploadSubmission

pytestmark = pytest.mark.unit


@pytest.fixture
def email_config():
    return EmailConfig(
        host="smtp.example.com",
        port=587,
        secure=False,
        user="no-reply@villa-claudia.eu",
        password="secret",
        admin_email="admin@villa-claudia.eu",
    )


@pytest.fixture
def submission():
    return UploadSubmission(
        booking_id="870",
        guest_name="John <b>Doe</b>",
        guest_email=None,
        travelers=[Traveler(name="John Doe", document_type="passport", document_number="X123")],
        files=[
            UploadedFile(
                original_name="passport.jpg",
                content=b"jpeg-bytes",
                content_type="image/jpeg",
                traveler_name="John Doe",
                document_type="passport",
                document_number="X123",
            ),
            UploadedFile(
                original_name="licence.pdf",
                content=b"%PDF",
                content_type="application/pdf",
                traveler_name="Jane Doe",
                document_type="drivers_license",
            ),
        ],
    )


@pytest.fixture
def booking():
    return Booking(
        booking_id="870",
        guest_name="John Doe",
        guest_email="john+test@example.com",
        check_in_date="2025-05-11",
        check_out_date="2025-05-18",
    )


class TestEmailClient:
    """Test cases for EmailClient."""

    def test_missing_configuration(self):
        client = EmailClient(EmailConfig(host="smtp.example.com", user="", password=""))

        with pytest.raises(EmailConfigError, match="EMAIL_USER, EMAIL_PASSWORD"):
            client.send(to="a@example.com", subject="Hi", body="Hello")

    def test_build_message_with_attachments(self, email_config):
        client = EmailClient(email_config)

        msg = client.build_message(
            to="admin@villa-claudia.eu",
            subject="Docs",
            body="<p>hi</p>",
            html=True,
            attachments=[("scan.png", b"png", "image/png"), ("id.pdf", b"%PDF", "application/pdf")],
        )

        parts = msg.get_payload()
        assert msg["From"] == "Villa Claudia <no-reply@villa-claudia.eu>"
        assert parts[0].get_content_type() == "text/html"
        assert parts[1].get_content_type() == "image/png"
        assert parts[1].get_filename() == "scan.png"
        assert parts[2].get_content_type() == "application/pdf"
        assert parts[2].get_payload(decode=True) == b"%PDF"

    @patch("villa_docs.guest_communications.email_client.smtplib.SMTP")
    def test_send_uses_starttls(self, mock_smtp, email_config):
        server = mock_smtp.return_value.__enter__.return_value

        EmailClient(email_config).send(to="guest@example.com", subject="Hi", body="Hello")

        mock_smtp.assert_called_once_with("smtp.example.com", 587)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("no-reply@villa-claudia.eu", "secret")
        assert server.sendmail.call_args[0][1] == ["guest@example.com"]

    @patch("villa_docs.guest_communications.email_client.smtplib.SMTP_SSL")
    def test_send_secure(self, mock_smtp_ssl, email_config):
        email_config.secure = True
        email_config.port = 465

        EmailClient(email_config).send(to="guest@example.com", subject="Hi", body="Hello")

        mock_smtp_ssl.assert_called_once_with("smtp.example.com", 465)


class TestNotifier:
    """Test cases for Notifier."""

    @pytest.fixture
    def email_client(self, email_config):
        client = Mock(spec=EmailClient)
        client.config = email_config
        client.smtp_server = email_config.host
        client.smtp_port = email_config.port
        return client

    def test_upload_notification(self, email_client, submission):
        assert Notifier(email_client).send_upload_notification(submission) is True

        kwargs = email_client.send.call_args.kwargs
        assert kwargs["to"] == "admin@villa-claudia.eu"
        assert kwargs["subject"] == "[Villa Claudia] Travel Documents Uploaded - Booking 870"
        assert kwargs["html"] is True
        assert kwargs["attachments"] == [
            ("John Doe - Passport (X123) - passport.jpg", b"jpeg-bytes", "image/jpeg"),
            ("Jane Doe - Driver's License - licence.pdf", b"%PDF", "application/pdf"),
        ]

    def test_upload_notification_failure_is_swallowed(self, email_client, submission):
        email_client.send.side_effect = OSError("connection refused")

        assert Notifier(email_client).send_upload_notification(submission) is False

    def test_document_request(self, email_client, booking):
        assert Notifier(email_client).send_document_request(booking) is True

        kwargs = email_client.send.call_args.kwargs
        assert kwargs["to"] == "john+test@example.com"
        assert "/uploads/8702025051120250518?email=john%2Btest%40example.com" in kwargs["body"]
        assert "Sunday, May 11, 2025" in kwargs["body"]

    def test_document_request_without_email(self, email_client, booking):
        booking.guest_email = None

        assert Notifier(email_client).send_document_request(booking) is False
        email_client.send.assert_not_called()

    def test_document_request_send_failure(self, email_client, booking):
        email_client.send.side_effect = EmailConfigError("Missing required email configuration: EMAIL_HOST")

        assert Notifier(email_client).send_document_request(booking) is False

    def test_magic_link_errors_propagate(self, email_client):
        email_client.send.side_effect = OSError("down")

        with pytest.raises(OSError):
            Notifier(email_client).send_magic_link("guest@example.com", "Ann", "https://x/verify?token=t")


class TestTemplates:

    def test_build_upload_link(self, booking):
        link = build_upload_link(booking, base_url="https://documents.villa-claudia.eu/")

        assert link == "https://documents.villa-claudia.eu/uploads/8702025051120250518?email=john%2Btest%40example.com"

    def test_upload_notification_escapes_guest_input(self, submission):
        html = upload_notification(submission)

        assert "John &lt;b&gt;Doe&lt;/b&gt;" in html
        assert "Not provided" in html
        assert "Driver&#x27;s License" in html
        assert "not stored on our servers" in html

    def test_upload_notification_with_numeric_traveler_fields(self):
        traveler = Traveler.from_dict({"name": 42, "documentNumber": 12345})
        submission = UploadSubmission("870", "John", travelers=[traveler],
                                      files=[UploadedFile("a.png", b"x", "image/png", document_number=traveler.document_number)])

        html = upload_notification(submission)

        assert "12345" in html

    @pytest.mark.parametrize("size,expected", [
        (512, "512 B"),
        (1536, "1.5 KB"),
        (1572864, "1.5 MB"),
    ])
    def test_format_file_size(self, size, expected):
        assert format_file_size(size) == expected

    def test_booking_dates_parsed(self, booking):
        assert booking.check_in_date == datetime(2025, 5, 11)
