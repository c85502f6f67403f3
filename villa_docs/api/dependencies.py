"""
Dependency injection and service container for FastAPI application.
"""
from typing import Optional
from functools import lru_cache

from fastapi import Depends, Header, HTTPException, Query

from ..guest_communications.notifier import Notifier
from ..utils.logger import setup_logger
from ..wordpress.client import WordPressClient
from .config import settings
from .services.auth_service import AuthService
from .services.booking_service import BookingService
from .services.reminder_service import ReminderService
from .services.upload_service import UploadService


_logger = None


def get_logger():
    """Get application logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logger("villa_docs_api", settings.log_level)
    return _logger


@lru_cache(maxsize=1)
def get_wordpress_client() -> WordPressClient:
    return WordPressClient()


@lru_cache(maxsize=1)
def get_notifier() -> Notifier:
    return Notifier()


@lru_cache(maxsize=1)
def get_upload_service() -> UploadService:
    return UploadService(get_notifier(), get_logger())


@lru_cache(maxsize=1)
def get_booking_service() -> BookingService:
    return BookingService(get_wordpress_client(), get_logger())


@lru_cache(maxsize=1)
def get_reminder_service() -> ReminderService:
    return ReminderService(get_wordpress_client(), get_notifier(), get_logger())


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    return AuthService(get_notifier(), get_logger())


def clear_service_cache():
    """Drop cached service instances, used on shutdown."""
    for getter in (get_wordpress_client, get_notifier, get_upload_service,
                   get_booking_service, get_reminder_service, get_auth_service):
        getter.cache_clear()


def bearer_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization.split(" ", 1)[1]


def require_scheduler_key(
    token: Optional[str] = Depends(bearer_token),
    key: Optional[str] = Query(None, description="Scheduler key, for manual runs"),
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    if not auth_service.check_scheduler_key(token or key):
        raise HTTPException(status_code=401, detail="Unauthorized - Invalid API key")


def require_admin(
    token: Optional[str] = Depends(bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> None:
    if not auth_service.check_admin_password(token):
        raise HTTPException(status_code=401, detail="Unauthorized access")
