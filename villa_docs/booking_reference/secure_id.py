"""
Secure booking reference encoding and decoding.

A secure booking reference is the booking id followed by the check-in date and,
optionally, the check-out date, all as digits with no separators
(``<id><YYYYMMDD>[<YYYYMMDD>]``). The WordPress plugin generates these for the
upload links it hands out.

The format carries no delimiter. The booking id is taken as the shortest digit
prefix that leaves exactly one or two 8-digit groups, so a 20 digit reference
decodes with a 4 digit id even when it was built from a 3 digit id and a
9 digit tail. References built by ``build_secure_id`` always decode back to
their id when the id is non-empty and both dates are present.
"""
import re
from datetime import date, datetime
from typing import Optional, Union

from ..utils.models import SecureBookingRef

SECURE_ID_PATTERN = re.compile(r'^(\d+?)(\d{8})(\d{8})?$', re.ASCII)


class InvalidSecureIdError(ValueError):
    """Raised when a secure booking reference cannot be decoded."""


def parse_secure_id(secure_id: str) -> SecureBookingRef:
    """
    Decode a secure booking reference.

    Args:
        secure_id: Digit string from the upload link

    Returns:
        Decoded booking id and date digit groups

    Raises:
        InvalidSecureIdError: If the string does not match the reference format
    """
    match = SECURE_ID_PATTERN.fullmatch(secure_id or "")
    if not match:
        raise InvalidSecureIdError(f"Invalid booking ID format: {secure_id!r}")
    booking_id, check_in, check_out = match.groups()
    return SecureBookingRef(booking_id=booking_id, check_in=check_in, check_out=check_out)


def extract_booking_id(secure_id: str) -> Optional[str]:
    """Booking id from a secure reference, or None when it does not parse."""
    try:
        return parse_secure_id(secure_id).booking_id
    except InvalidSecureIdError:
        return None


def _date_digits(value: Union[date, datetime, str]) -> str:
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y%m%d")
    return str(value).replace("-", "")


def build_secure_id(
    booking_id: Union[str, int],
    check_in: Union[date, datetime, str],
    check_out: Optional[Union[date, datetime, str]] = None,
) -> str:
    """Build the reference the same way the WordPress plugin does."""
    secure_id = f"{booking_id}{_date_digits(check_in)}"
    if check_out:
        secure_id += _date_digits(check_out)
    return secure_id
