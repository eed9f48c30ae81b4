"""Tests for email normalization."""

import pytest

from modules.auth.exceptions import InvalidEmailError
from modules.auth.validation import MAX_EMAIL_LENGTH, normalize_email


class TestNormalizeEmail:
    def test_lowercases_and_trims(self):
        assert normalize_email("  Shopper@Example.COM ") == "shopper@example.com"

    @pytest.mark.parametrize(
        "value,reason",
        [
            (None, "Email must be a string"),
            (42, "Email must be a string"),
            ("", "Email cannot be empty"),
            ("   ", "Email cannot be empty"),
            ("no-at-sign.example.com", "Invalid email format"),
            ("user@nodot", "Invalid email format"),
            ("two words@example.com", "Invalid email format"),
            ("a@b@example.com", "Invalid email format"),
        ],
    )
    def test_rejects_invalid(self, value, reason):
        with pytest.raises(InvalidEmailError) as exc_info:
            normalize_email(value)
        assert exc_info.value.message == reason
        assert exc_info.value.code == "INVALID_EMAIL"

    def test_rejects_overlong(self):
        """Addresses longer than the limit should be rejected."""
        local = "a" * (MAX_EMAIL_LENGTH - len("@example.com") + 1)
        with pytest.raises(InvalidEmailError) as exc_info:
            normalize_email(f"{local}@example.com")
        assert exc_info.value.message == "Email exceeds maximum length"

    def test_accepts_at_limit(self):
        local = "a" * (MAX_EMAIL_LENGTH - len("@example.com"))
        assert len(normalize_email(f"{local}@example.com")) == MAX_EMAIL_LENGTH
