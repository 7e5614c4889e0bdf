"""Domain layer errors.

Every domain error carries a machine-checkable ``kind`` that the interface
layer renders next to the human-readable message.
"""


class DomainError(Exception):
    """Base domain error."""

    kind = "domain_error"


class ValidationError(DomainError):
    """Malformed or missing input (lengths, tags, vote direction)."""

    kind = "validation_error"


class NotFoundError(DomainError):
    """Raised when an id does not resolve to an active entity."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnauthorizedError(DomainError):
    """Raised when the caller identity is missing."""

    kind = "unauthorized"


class ForbiddenError(UnauthorizedError):
    """Raised when a user attempts to change content they don't own."""

    kind = "forbidden"

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class UpstreamFailure(DomainError):
    """A content store round trip failed (network, timeout)."""

    kind = "upstream_failure"


def describe_validation_errors(exc) -> str:
    """Flatten a pydantic ``ValidationError`` into one readable message.

    Args:
        exc: A ``pydantic.ValidationError``

    Returns:
        ``"field: message; field: message"``
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "root")
        message = error["msg"].removeprefix("Value error, ")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)
