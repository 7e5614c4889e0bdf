"""Caller identity from the ``X-User-Id`` header.

Authentication happens upstream; this service only trusts the header.
"""

from uuid import UUID

from fastapi import Header

from stackit.domain.error import UnauthorizedError, ValidationError


def _parse_user_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        raise ValidationError(f"X-User-Id is not a valid UUID: {raw!r}")


async def current_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> UUID:
    """Require a caller identity.

    Raises:
        UnauthorizedError: If the header is missing
        ValidationError: If the header is not a UUID
    """
    if not x_user_id:
        raise UnauthorizedError("X-User-Id header is required")
    return _parse_user_id(x_user_id)


async def optional_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> UUID | None:
    """Caller identity when supplied, else None."""
    if not x_user_id:
        return None
    return _parse_user_id(x_user_id)
