"""Domain layer errors."""

from collections.abc import Sequence


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when submitted data cannot be stored."""

    pass


class MissingFieldsError(ValidationError):
    """Raised when a required field is absent or blank.

    The message always names every required field of the resource, not
    only the ones that were missing.
    """

    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
