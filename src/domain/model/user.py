from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    password_hash: str | None = None
    reset_token: str | None = None
    reset_token_expire: datetime | None = None

    @property
    def has_pending_reset(self) -> bool:
        return self.reset_token is not None and self.reset_token_expire is not None
