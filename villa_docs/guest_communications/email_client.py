# guest_communications/email_client.py
import smtplib
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Iterable, Optional, Tuple

from config.settings import EmailConfig, email_config

# (filename, content, mime type)
Attachment = Tuple[str, bytes, str]


class EmailConfigError(RuntimeError):
    """Raised when SMTP settings required for sending are missing."""


class EmailClient:
    def __init__(self, config: Optional[EmailConfig] = None):
        self.config = config or email_config
        self.smtp_server = self.config.host
        self.smtp_port = self.config.port
        self.username = self.config.user
        self.password = self.config.password

    def validate(self) -> bool:
        missing = self.config.missing_fields()
        if missing:
            raise EmailConfigError(f"Missing required email configuration: {', '.join(missing)}")
        return True

    def build_message(
        self,
        to: str,
        subject: str,
        body: str,
        html: bool = False,
        attachments: Optional[Iterable[Attachment]] = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("mixed")
        msg["Subject"] = subject
        msg["From"] = self.config.sender
        msg["To"] = to
        msg.attach(MIMEText(body, "html" if html else "plain", "utf-8"))

        for filename, content, mime_type in attachments or []:
            maintype, _, subtype = mime_type.partition("/")
            part = MIMEApplication(content, _subtype=subtype or "octet-stream")
            if maintype and maintype != "application":
                part.replace_header("Content-Type", mime_type)
            part.add_header("Content-Disposition", "attachment", filename=filename)
            msg.attach(part)
        return msg

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html: bool = False,
        attachments: Optional[Iterable[Attachment]] = None,
    ):
        self.validate()
        msg = self.build_message(to, subject, body, html=html, attachments=attachments)

        if self.config.secure:
            with smtplib.SMTP_SSL(self.smtp_server, self.smtp_port) as server:
                server.login(self.username, self.password)
                server.sendmail(self.config.from_address, [to], msg.as_string())
        else:
            with smtplib.SMTP(self.smtp_server, self.smtp_port) as server:
                server.starttls()
                server.login(self.username, self.password)
                server.sendmail(self.config.from_address, [to], msg.as_string())
