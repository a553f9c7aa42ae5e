"""Masking helpers for values that must not reach logs in cleartext."""

MASK = "*"


def mask_ssn(value: str | None) -> str:
    """Keep only the last four characters of an SSN-like string."""
    if value is None:
        return "None"
    visible = value[-4:] if len(value) > 4 else ""
    return MASK * (len(value) - len(visible)) + visible


def mask_email(value: str | None) -> str:
    """Keep the first character of the local part and the whole domain.

    A one-character local part is masked entirely. Values without a local
    part or without an "@" are masked in full.
    """
    if value is None:
        return "None"
    local, at, domain = value.partition("@")
    if not at or not local:
        return MASK * len(value)
    visible = local[:1] if len(local) > 1 else ""
    return visible + MASK * (len(local) - len(visible)) + at + domain
