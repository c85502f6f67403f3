import hmac
from typing import Dict, Optional
from urllib.parse import urlencode

from ..config import settings
from ..security.jwt import create_magic_link_token, verify_magic_link_token
from ...guest_communications.notifier import Notifier
from config.settings import app_config


def secrets_match(provided: Optional[str], expected: str) -> bool:
    """Constant time comparison of a shared secret."""
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


class AuthService:
    def __init__(self, notifier: Notifier, logger):
        self.notifier = notifier
        self.logger = logger

    def build_magic_link(self, token: str) -> str:
        base = app_config.public_base_url.rstrip("/")
        return f"{base}/documents/verify?{urlencode({'token': token})}"

    def request_magic_link(self, email: str, booking_id: str, name: Optional[str] = None) -> str:
        """Sign a token for the booking and email the link to the guest."""
        exp_seconds = app_config.magic_link_exp_seconds
        token = create_magic_link_token(email, booking_id, name, exp_seconds=exp_seconds)
        link = self.build_magic_link(token)
        self.notifier.send_magic_link(email, name, link, valid_hours=exp_seconds // 3600)
        self.logger.info("magic_link_requested", email=email, booking_id=booking_id)
        return link

    def verify(self, token: str) -> Dict[str, str]:
        """
        Raises:
            TokenError: If the token is malformed, tampered or expired
        """
        return verify_magic_link_token(token)

    def check_admin_password(self, password: Optional[str]) -> bool:
        return secrets_match(password, settings.admin_password)

    def check_scheduler_key(self, key: Optional[str]) -> bool:
        return secrets_match(key, settings.scheduler_api_key)
