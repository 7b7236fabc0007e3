"""Domain layer errors."""

from typing import Optional, Sequence

from qna.domain.validation import FieldError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input failed validation; carries one entry per offending field."""

    def __init__(self, errors: Sequence[FieldError], message: str = "Validation failed"):
        self.errors = list(errors)
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a unique value (e.g. username) is already taken."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials are missing or wrong."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they are not allowed to perform."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    Missing, soft-deleted and malformed-id lookups all produce the same
    message so callers cannot tell them apart.
    """

    def __init__(self, resource: str, identifier: Optional[str] = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")
