"""Password reset service: the reset-token lifecycle.

States per user: no pending reset → pending reset → no pending reset, either
by consumption or by lazy expiry (an expired token simply stops matching).

request:  validate email → store token + expiry (one update) → email the link
consume:  validate password → hash → match-and-clear (one update)
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone

from domain.model.email import OutgoingEmail
from domain.model.errors import InvalidResetTokenError, NotFoundError
from domain.model.user import User
from port.mailer import MailerPort
from port.user_repository import UserRepository
from services.credentials import hash_password
from services.mail_service import DeliveryPolicy, deliver
from services.validation import require_password_strength, require_valid_email
from utils.email_templates import PASSWORD_RESET_SUBJECT, password_reset_template

logger = logging.getLogger(__name__)

RESET_TOKEN_BYTES = 20
RESET_TOKEN_TTL = timedelta(minutes=10)


def generate_reset_token() -> str:
    """40 hex characters from a CSPRNG."""
    return secrets.token_hex(RESET_TOKEN_BYTES)


def build_reset_url(base_url: str, token: str) -> str:
    return f"{base_url.rstrip('/')}/reset/{token}"


def request_password_reset(
    repo: UserRepository,
    mailer: MailerPort,
    email: str | None,
    base_url: str,
    now: datetime | None = None,
) -> str:
    """Start a password reset for ``email`` and return the new token.

    The token is persisted before the email is sent. If sending fails the
    caller gets DependencyError while the stored token stays valid until it
    is consumed, replaced by a later request, or expires.

    Raises:
        ValidationError: email missing or malformed
        NotFoundError: no user with this email
        DependencyError: the store failed, or the reset email could not be sent
    """
    email = require_valid_email((email or "").strip(), "Valid email is required")
    now = now or datetime.now(timezone.utc)

    token = generate_reset_token()
    user = repo.set_reset_token(email, token, now + RESET_TOKEN_TTL)
    if not user:
        raise NotFoundError("Email not found")

    logger.info("Password reset requested", extra={"userId": user.id})

    deliver(
        mailer,
        OutgoingEmail(
            to=email,
            subject=PASSWORD_RESET_SUBJECT,
            html=password_reset_template(build_reset_url(base_url, token)),
        ),
        DeliveryPolicy.REQUIRED,
    )
    return token


def reset_password(
    repo: UserRepository,
    token: str,
    new_password: str | None,
    now: datetime | None = None,
) -> User:
    """Consume a reset token and set a new password.

    Raises:
        WeakPasswordError: new password shorter than 6 characters
        InvalidResetTokenError: token unknown, already consumed, or expired
        DependencyError: the store failed
    """
    new_password = require_password_strength(new_password)
    now = now or datetime.now(timezone.utc)

    user = repo.consume_reset_token(token, hash_password(new_password), now)
    if not user:
        raise InvalidResetTokenError("Invalid or expired token")

    logger.info("Password reset completed", extra={"userId": user.id})
    return user
