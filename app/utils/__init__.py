"""Utility functions and helpers.

- logs: logging setup shared by the HTTP app and the event handlers
- redaction: masking of personal data in diagnostic output
"""

from app.utils.logs import configure_logging
from app.utils.redaction import mask_email, mask_ssn

__all__ = ["configure_logging", "mask_email", "mask_ssn"]
