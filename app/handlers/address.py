"""Address check handler."""

import logging
from typing import Any

from app.models import AddressRequest, HandlerResponse, parse_event
from app.services import validate_address
from app.utils import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Validate that every address field is filled in.

    Raises pydantic.ValidationError when the event is not an object at all.
    """
    fields = parse_event(event)
    request = AddressRequest.model_validate(fields)
    street, city, state, zip_code = (
        fields.get(key) for key in ("street", "city", "state", "zip")
    )
    logger.info(f"Address information: {street}, {city}, {state} - {zip_code}")

    result = validate_address(request)
    return HandlerResponse.from_result(result).to_event()
