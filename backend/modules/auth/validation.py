"""Email normalization shared by the login route and the auth service."""

import re

from .exceptions import InvalidEmailError


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 320


def normalize_email(email: object) -> str:
    """
    Validate an email address and return its canonical form.

    The canonical form is trimmed and lowercased; it is the key users are
    stored under.

    Raises:
        InvalidEmailError: If the value is not a string, is empty, is not
            shaped like local@domain.tld, or is longer than 320 characters.
    """
    if not isinstance(email, str):
        raise InvalidEmailError("Email must be a string")

    candidate = email.strip()
    if not candidate:
        raise InvalidEmailError("Email cannot be empty")
    if len(candidate) > MAX_EMAIL_LENGTH:
        raise InvalidEmailError("Email exceeds maximum length")
    if not EMAIL_PATTERN.match(candidate):
        raise InvalidEmailError("Invalid email format")

    return candidate.lower()
