"""Address presence check."""

from app.models import AddressRequest, ValidationResponse

CHECK_NAME = "address"


def is_filled(value: str | None) -> bool:
    """True when the value is present and not blank after trimming."""
    return value is not None and len(value.strip()) > 0


def validate_address(request: AddressRequest) -> ValidationResponse:
    """Approve only when street, city, state and zip are all filled in."""
    fields = (request.street, request.city, request.state, request.zip)
    approved = all(is_filled(value) for value in fields)
    return ValidationResponse.for_check(CHECK_NAME, approved)
