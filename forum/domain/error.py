"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StructuralViolationError(DomainError):
    """Raised when a write would break the shape of the stored data.

    Examples: a reply whose parent lives in another thread, or a batch that
    trips a uniqueness constraint with no defined resolution.
    """

    pass


class InternalError(DomainError):
    """Raised when the store behaves in a way the domain cannot explain."""

    pass
