"""
Configuration settings for the Villa Claudia document portal.
"""
import os
from typing import Tuple
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class EmailConfig:
    """SMTP configuration settings."""
    host: str = os.getenv("EMAIL_HOST", "smtp.hostinger.com")
    port: int = int(os.getenv("EMAIL_PORT", "587"))
    secure: bool = os.getenv("EMAIL_SECURE", "false").lower() == "true"
    user: str = os.getenv("EMAIL_USER", "")
    password: str = os.getenv("EMAIL_PASSWORD", "")
    from_name: str = os.getenv("EMAIL_FROM_NAME", "Villa Claudia")
    from_address: str = os.getenv("EMAIL_FROM_ADDRESS", "no-reply@villa-claudia.eu")
    admin_email: str = os.getenv("ADMIN_EMAIL", "administration@villa-claudia.eu")

    @property
    def sender(self) -> str:
        """Combined "Name <address>" sender header."""
        return f"{self.from_name} <{self.from_address}>"

    def missing_fields(self) -> list:
        """Names of the environment variables required for sending that are unset."""
        required = {
            "EMAIL_HOST": self.host,
            "EMAIL_USER": self.user,
            "EMAIL_PASSWORD": self.password,
        }
        return [name for name, value in required.items() if not value]


@dataclass
class WordPressConfig:
    """WordPress booking API settings."""
    api_url: str = os.getenv("WORDPRESS_API_URL", "")
    api_key: str = os.getenv("WORDPRESS_API_KEY", "")
    timeout: int = int(os.getenv("WORDPRESS_TIMEOUT", "10"))


@dataclass
class AppConfig:
    """Application configuration settings."""
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    public_base_url: str = os.getenv("PUBLIC_BASE_URL", "http://localhost:3000")
    site_url: str = "https://villa-claudia.eu"

    # Upload limits
    max_file_size: int = 10 * 1024 * 1024
    max_total_size: int = 25 * 1024 * 1024
    allowed_mime_types: Tuple[str, ...] = ("image/jpeg", "image/png", "application/pdf")

    # Reminder window, in days before check-in
    reminder_window_start: float = 6.5
    reminder_window_end: float = 7.5

    # Magic link lifetime
    magic_link_exp_seconds: int = int(os.getenv("MAGIC_LINK_EXP_SECONDS", "86400"))


email_config = EmailConfig()
wordpress_config = WordPressConfig()
app_config = AppConfig()
