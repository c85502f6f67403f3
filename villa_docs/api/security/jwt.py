import time
import hmac
import json
import base64
import hashlib
import binascii
from typing import Dict, Any, Optional

from ..config import settings
from config.settings import app_config


class TokenError(ValueError):
    """Raised for malformed, tampered or expired tokens."""


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode()


def _b64url_decode(data: str) -> bytes:
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(signing_input: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode(), signing_input, hashlib.sha256).digest()


def create_token(payload: Dict[str, Any], exp_seconds: Optional[int] = None, secret: Optional[str] = None) -> str:
    secret = secret or settings.jwt_secret
    header = {"alg": "HS256", "typ": "JWT"}
    now = int(time.time())
    exp = now + int(exp_seconds or app_config.magic_link_exp_seconds)
    body = dict(payload)
    body.setdefault("iat", now)
    body.setdefault("exp", exp)

    header_b64 = _b64url_encode(json.dumps(header, separators=(",", ":")).encode())
    payload_b64 = _b64url_encode(json.dumps(body, separators=(",", ":")).encode())
    signing_input = f"{header_b64}.{payload_b64}".encode()
    sig_b64 = _b64url_encode(_sign(signing_input, secret))
    return f"{header_b64}.{payload_b64}.{sig_b64}"


def verify_token(token: str, secret: Optional[str] = None) -> Dict[str, Any]:
    secret = secret or settings.jwt_secret
    try:
        header_b64, payload_b64, sig_b64 = token.split(".")
    except (ValueError, AttributeError):
        raise TokenError("Invalid token format")

    signing_input = f"{header_b64}.{payload_b64}".encode()
    try:
        header = json.loads(_b64url_decode(header_b64).decode())
        provided_sig = _b64url_decode(sig_b64)
    except (ValueError, binascii.Error):
        raise TokenError("Invalid token encoding")
    if not isinstance(header, dict) or header.get("alg") != "HS256":
        raise TokenError("Unsupported token algorithm")
    if not hmac.compare_digest(_sign(signing_input, secret), provided_sig):
        raise TokenError("Invalid token signature")

    payload = json.loads(_b64url_decode(payload_b64).decode())
    if int(time.time()) >= int(payload.get("exp", 0)):
        raise TokenError("Token expired")
    return payload


def create_magic_link_token(email: str, booking_id: str, name: Optional[str] = None, **kwargs) -> str:
    """Token granting upload access for one booking."""
    return create_token({"email": email, "bookingId": booking_id, "name": name or "Guest"}, **kwargs)


def verify_magic_link_token(token: str, secret: Optional[str] = None) -> Dict[str, str]:
    payload = verify_token(token, secret=secret)
    if not payload.get("email") or not payload.get("bookingId"):
        raise TokenError("Token is missing booking claims")
    return {
        "email": payload["email"],
        "bookingId": payload["bookingId"],
        "name": payload.get("name", "Guest"),
    }
