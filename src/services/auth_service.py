"""Auth service: registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import hmac
import logging
from typing import Any

from domain.model.email import OutgoingEmail
from domain.model.errors import AuthenticationError, DuplicateError, NotFoundError, ValidationError
from domain.model.user import User
from port.mailer import MailerPort
from port.user_repository import UserRepository
from services.credentials import hash_password, verify_password
from services.mail_service import DeliveryPolicy, deliver
from services.validation import require_encodable, require_valid_email
from utils.email_templates import WELCOME_SUBJECT, welcome_template

logger = logging.getLogger(__name__)


def register(
    repo: UserRepository,
    mailer: MailerPort,
    name: str | None,
    email: str | None,
    password: str | None,
) -> User:
    """Register a new user and send a best-effort welcome email.

    Returns the created User domain object.

    Raises:
        ValidationError: a field is missing or the email is malformed
        DuplicateError: email already registered
        DependencyError: the store failed
    """
    name = (name or "").strip()
    email = (email or "").strip()
    if not name or not email or not password:
        raise ValidationError("All fields are required")

    require_valid_email(email)
    require_encodable(name, "Invalid name")
    require_encodable(password, "Invalid password")

    if repo.get_by_email(email):
        raise DuplicateError("Email already registered")

    # create() also raises DuplicateError if a concurrent insert wins the unique index
    user = repo.create(email=email, password_hash=hash_password(password), name=name)
    logger.info("User registered", extra={"userId": user.id, "email": email})

    deliver(
        mailer,
        OutgoingEmail(to=email, subject=WELCOME_SUBJECT, html=welcome_template(name)),
        DeliveryPolicy.BEST_EFFORT,
    )
    return user


def authenticate(repo: UserRepository, email: str | None, password: str | None) -> User:
    """Authenticate a user by email and password.

    Raises:
        ValidationError: email or password missing
        NotFoundError: no user with this email
        AuthenticationError: password does not match
        DependencyError: the store failed
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = repo.get_by_email(email.strip())
    if not user:
        raise NotFoundError("Email not found")

    if not verify_password(password, user.password_hash):
        logger.info("Login rejected: password mismatch", extra={"userId": user.id})
        raise AuthenticationError("Invalid password")

    logger.info("User logged in", extra={"userId": user.id})
    return user


def _matches(supplied: Any, expected: str) -> bool:
    if not isinstance(supplied, str):
        return False
    # lone surrogates from JSON escapes are not valid UTF-8
    return hmac.compare_digest(
        supplied.encode("utf-8", "surrogatepass"), expected.encode("utf-8", "surrogatepass"),
    )


def authenticate_admin(
    admin_email: str | None,
    admin_password: str | None,
    email: Any,
    password: Any,
) -> str:
    """Check credentials against the configured admin identity.

    Returns the admin email on success.

    Raises:
        AuthenticationError: no admin configured, or either value differs
    """
    if not admin_email or not admin_password:
        logger.warning("Admin login attempted but no admin identity is configured")
        raise AuthenticationError("Invalid credentials")

    # evaluate both comparisons so a wrong email and a wrong password take equal time
    email_ok = _matches(email, admin_email)
    password_ok = _matches(password, admin_password)
    if not (email_ok and password_ok):
        logger.info("Admin login rejected")
        raise AuthenticationError("Invalid credentials")

    logger.info("Admin logged in")
    return admin_email
