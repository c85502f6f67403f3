"""
Unit tests for secure booking reference decoding.
"""
from datetime import date

import pytest

from villa_docs.booking_reference import (
    InvalidSecureIdError,
    build_secure_id,
    extract_booking_id,
    parse_secure_id,
)

pytestmark = pytest.mark.unit


class TestParseSecureId:
    """Test cases for parse_secure_id."""

    def test_id_with_both_dates(self):
        ref = parse_secure_id("123452025081520250822")

        assert ref.booking_id == "12345"
        assert ref.check_in == "20250815"
        assert ref.check_out == "20250822"

    def test_id_with_check_in_only(self):
        ref = parse_secure_id("1234520250815")

        assert ref.booking_id == "12345"
        assert ref.check_in == "20250815"
        assert ref.check_out is None

    def test_shortest_id_prefix_wins(self):
        # 20 digits leave room for two date groups after a 4 digit prefix
        ref = parse_secure_id("87020250511202505018")

        assert ref.booking_id == "8702"
        assert ref.check_in == "02505112"
        assert ref.check_out == "02505018"

    @pytest.mark.parametrize("value", [
        "",
        "20250815",
        "12345-20250815",
        "abc20250815",
        "1234520250815\n",
        "１２３20250815",
    ])
    def test_invalid_references(self, value):
        with pytest.raises(InvalidSecureIdError):
            parse_secure_id(value)

    def test_none_is_invalid(self):
        with pytest.raises(InvalidSecureIdError):
            parse_secure_id(None)

    def test_invalid_reference_is_value_error(self):
        assert issubclass(InvalidSecureIdError, ValueError)


class TestExtractBookingId:

    def test_returns_id(self):
        assert extract_booking_id("422025081520250822") == "42"

    def test_returns_none_for_garbage(self):
        assert extract_booking_id("not-a-reference") is None


class TestBuildSecureId:
    """Test cases for build_secure_id."""

    def test_matches_wordpress_format(self):
        assert build_secure_id(870, "2025-05-11", "2025-05-18") == "8702025051120250518"

    def test_accepts_dates(self):
        assert build_secure_id("12", date(2025, 8, 15)) == "1220250815"

    def test_built_reference_decodes_to_same_id(self):
        secure_id = build_secure_id("870", date(2025, 5, 11), date(2025, 5, 18))

        assert parse_secure_id(secure_id).booking_id == "870"
