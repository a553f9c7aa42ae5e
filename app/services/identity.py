"""SSN and email format check.

Both patterns must match the whole string. The SSN is nine ASCII digits,
either bare or grouped 3-2-4 with hyphens at both group boundaries. The email
pattern is deliberately simple and is kept as is, including the 2-4 letter
top-level domain limit.
"""

import re

from app.models import IdentityRequest, ValidationResponse

CHECK_NAME = "identity"

SSN_PATTERN = re.compile(r"[0-9]{9}|[0-9]{3}-[0-9]{2}-[0-9]{4}")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,4}")


def _matches(pattern: re.Pattern[str], value: str | None) -> bool:
    return value is not None and pattern.fullmatch(value) is not None


def is_valid_ssn(value: str | None) -> bool:
    return _matches(SSN_PATTERN, value)


def is_valid_email(value: str | None) -> bool:
    return _matches(EMAIL_PATTERN, value)


def validate_identity(request: IdentityRequest) -> ValidationResponse:
    """Approve only when both the SSN and the email are well formed."""
    approved = is_valid_ssn(request.ssn) and is_valid_email(request.email)
    return ValidationResponse.for_check(CHECK_NAME, approved)
