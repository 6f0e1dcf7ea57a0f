"""Domain exceptions."""


class AccessControlError(Exception):
    """Base exception for yetki."""

    pass


class ValidationError(AccessControlError):
    """Validation failed for input data."""

    pass


class NotFoundError(AccessControlError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class InvalidStateError(AccessControlError):
    """Operation is not allowed in the current state of the resource."""

    pass
