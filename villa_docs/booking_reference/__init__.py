from .secure_id import (
    InvalidSecureIdError,
    build_secure_id,
    extract_booking_id,
    parse_secure_id,
)

__all__ = ['InvalidSecureIdError', 'build_secure_id', 'extract_booking_id', 'parse_secure_id']
