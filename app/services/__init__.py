"""Validation logic for each check.

Every function here is pure: it takes a request model and returns a
ValidationResponse without logging or touching any shared state.
"""

from app.services.address import validate_address
from app.services.identity import validate_identity

__all__ = ["validate_address", "validate_identity"]
