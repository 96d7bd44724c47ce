"""
Tests for expiry status classification.
"""

from datetime import date

import pytest

from gs1_decoder import ExpiryStatus, expiry_status, parse_gs1_data

TODAY = date(2024, 1, 15)


class TestExpiryStatus:

    def test_expired(self):
        assert expiry_status("14/01/2024", today=TODAY) is ExpiryStatus.EXPIRED

    def test_expires_today_is_near(self):
        assert expiry_status("15/01/2024", today=TODAY) is ExpiryStatus.NEAR_EXPIRY

    def test_window_is_inclusive(self):
        assert expiry_status("15/07/2024", near_months=6, today=TODAY) is ExpiryStatus.NEAR_EXPIRY

    def test_valid_after_window(self):
        assert expiry_status("16/07/2024", near_months=6, today=TODAY) is ExpiryStatus.VALID

    def test_custom_window(self):
        assert expiry_status("16/07/2024", near_months=12, today=TODAY) is ExpiryStatus.NEAR_EXPIRY

    @pytest.mark.parametrize("value", [None, "", "2312", "31/02/2023"])
    def test_unknown(self, value):
        assert expiry_status(value, today=TODAY) is ExpiryStatus.UNKNOWN

    def test_from_decoded_record(self):
        record = parse_gs1_data("0112345678901234" "17231231")

        assert expiry_status(record.expiration_date, today=TODAY) is ExpiryStatus.EXPIRED

    def test_status_values(self):
        assert ExpiryStatus.NEAR_EXPIRY.value == "Near Expiry"
