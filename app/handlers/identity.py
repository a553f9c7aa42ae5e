"""Identity check handler."""

import logging
from typing import Any

from app.models import HandlerResponse, IdentityRequest, parse_event
from app.services import validate_identity
from app.utils import configure_logging, mask_email, mask_ssn
from config import settings

configure_logging()
logger = logging.getLogger(__name__)


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Validate SSN and email formats.

    Raises pydantic.ValidationError when the event is not an object at all.
    """
    fields = parse_event(event)
    request = IdentityRequest.model_validate(fields)
    if settings.redact_pii:
        ssn, email = mask_ssn(request.ssn), mask_email(request.email)
    else:
        ssn, email = fields.get("ssn"), fields.get("email")
    logger.info(f"SSN: {ssn} and email: {email}")

    result = validate_identity(request)
    return HandlerResponse.from_result(result).to_event()
