"""HTTP routes that invoke the check handlers with a JSON body as the event."""

from typing import Any

from fastapi import APIRouter

from app.handlers import address, identity

router = APIRouter(prefix="/checks", tags=["checks"])


@router.post("/address")
async def check_address(event: dict[str, Any]) -> dict[str, Any]:
    """Run the address check and return its handler envelope unchanged."""
    return address.lambda_handler(event, None)


@router.post("/identity")
async def check_identity(event: dict[str, Any]) -> dict[str, Any]:
    """Run the identity check and return its handler envelope unchanged."""
    return identity.lambda_handler(event, None)
