"""
Unit tests for magic link tokens.
"""
import pytest

from villa_docs.api.security.jwt import (
    TokenError,
    create_magic_link_token,
    create_token,
    verify_magic_link_token,
    verify_token,
)

pytestmark = pytest.mark.unit

SECRET = "test-secret"


class TestMagicLinkTokens:
    """Test cases for token issuance and verification."""

    def test_round_trip(self):
        token = create_magic_link_token("guest@example.com", "870", "Ann", secret=SECRET)

        assert verify_magic_link_token(token, secret=SECRET) == {
            "email": "guest@example.com",
            "bookingId": "870",
            "name": "Ann",
        }

    def test_name_defaults_to_guest(self):
        token = create_magic_link_token("guest@example.com", "870", secret=SECRET)

        assert verify_magic_link_token(token, secret=SECRET)["name"] == "Guest"

    def test_expiry_is_24_hours(self):
        payload = verify_token(create_magic_link_token("g@example.com", "1", secret=SECRET), secret=SECRET)

        assert payload["exp"] - payload["iat"] == 24 * 60 * 60

    def test_expired_token(self):
        token = create_magic_link_token("guest@example.com", "870", secret=SECRET, exp_seconds=-1)

        with pytest.raises(TokenError, match="expired"):
            verify_magic_link_token(token, secret=SECRET)

    def test_tampered_payload(self):
        token = create_magic_link_token("guest@example.com", "870", secret=SECRET)
        other = create_magic_link_token("guest@example.com", "999", secret=SECRET)
        header, _, signature = token.split(".")
        forged = ".".join([header, other.split(".")[1], signature])

        with pytest.raises(TokenError, match="signature"):
            verify_magic_link_token(forged, secret=SECRET)

    def test_wrong_secret(self):
        token = create_magic_link_token("guest@example.com", "870", secret=SECRET)

        with pytest.raises(TokenError):
            verify_magic_link_token(token, secret="another-secret")

    @pytest.mark.parametrize("token", ["", "abc", "a.b", "a.b.c.d", "!!.??.##"])
    def test_malformed_tokens(self, token):
        with pytest.raises(TokenError):
            verify_magic_link_token(token, secret=SECRET)

    def test_token_without_booking_claims(self):
        token = create_token({"sub": "someone"}, secret=SECRET)

        with pytest.raises(TokenError, match="claims"):
            verify_magic_link_token(token, secret=SECRET)

    def test_token_error_is_value_error(self):
        assert issubclass(TokenError, ValueError)
