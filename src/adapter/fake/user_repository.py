"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone

from domain.model.errors import DuplicateError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, email: str, password_hash: str, name: str) -> User:
        if any(u.email == email for u in self.store.values()):
            raise DuplicateError("Email already registered")

        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)

        user = User(
            id=user_id,
            name=name,
            email=email,
            created_at=now,
            updated_at=now,
            password_hash=password_hash,
        )
        self.store[user_id] = user
        return user

    def set_reset_token(self, email: str, token: str, expire: datetime) -> User | None:
        user = self.get_by_email(email)
        if not user:
            return None

        user.reset_token = token
        user.reset_token_expire = expire
        user.updated_at = datetime.now(timezone.utc)
        return user

    def consume_reset_token(self, token: str, password_hash: str, now: datetime) -> User | None:
        for user in self.store.values():
            if user.reset_token == token and user.reset_token_expire and user.reset_token_expire > now:
                user.password_hash = password_hash
                user.reset_token = None
                user.reset_token_expire = None
                user.updated_at = now
                return user
        return None

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)
