"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class AuthenticationError(DomainError):
    """Credentials or session token were rejected."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class WeakPasswordError(ValidationError):
    """New password does not meet the minimum length."""


class InvalidResetTokenError(ValidationError):
    """Reset token is unknown, already used, or past its expiry."""


class DependencyError(DomainError):
    """An external collaborator (store, mail, LLM) failed."""
