"""Pydantic models for check requests and responses.

Requests are lenient: every field is an optional string and anything that is
not a string is treated as absent, so bad input fails validation instead of
faulting. Responses are built through a single constructor so the message can
only ever say what the approval flag says.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

EVENT_ADAPTER = TypeAdapter(dict[str, Any])


def parse_event(event: Any) -> dict[str, Any]:
    """Return the event as a dict, or raise ValidationError if it is not a JSON object."""
    return EVENT_ADAPTER.validate_python(event)


class CheckRequest(BaseModel):
    """Base for check input records."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def non_string_as_absent(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class AddressRequest(CheckRequest):
    """Address fields supplied to the address check."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


class IdentityRequest(CheckRequest):
    """Identity fields supplied to the identity check."""

    ssn: str | None = None
    email: str | None = None


class ValidationResponse(BaseModel):
    """Outcome of a single check."""

    model_config = ConfigDict(frozen=True)

    approved: bool
    message: str

    @classmethod
    def for_check(cls, check: str, approved: bool) -> "ValidationResponse":
        outcome = "passed" if approved else "failed"
        return cls(approved=approved, message=f"{check} validation {outcome}")

    def to_body(self) -> str:
        """JSON body in the shape the calling workflow expects."""
        return json.dumps(
            {"approved": self.approved, "message": self.message},
            separators=(",", ":"),
        )


class HandlerResponse(BaseModel):
    """Envelope returned by every event handler."""

    status_code: int = Field(default=200, alias="statusCode")
    body: str

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: ValidationResponse) -> "HandlerResponse":
        return cls(body=result.to_body())

    def to_event(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


__all__ = [
    "AddressRequest",
    "CheckRequest",
    "HandlerResponse",
    "IdentityRequest",
    "ValidationResponse",
    "parse_event",
]
