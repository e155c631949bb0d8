from datetime import datetime
from typing import Protocol

from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations raise DuplicateError when an email is already taken and
    DependencyError when the underlying store fails.
    """
    def create(self, email: str, password_hash: str, name: str) -> User:
        """Create a new user and return it."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def set_reset_token(self, email: str, token: str, expire: datetime) -> User | None:
        """Store a pending reset on the user with this email.

        Replaces any earlier pending token. Return the updated User or None
        if no user has that email.
        """
        ...

    def consume_reset_token(self, token: str, password_hash: str, now: datetime) -> User | None:
        """Atomically match an unexpired reset token, replace the password
        hash and clear both reset fields.

        Return the updated User, or None when no pending reset matches.
        """
        ...
