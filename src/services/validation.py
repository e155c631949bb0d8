"""Input validation shared by the auth and password-reset services."""

from email_validator import EmailNotValidError, validate_email

from domain.model.errors import ValidationError, WeakPasswordError

MIN_PASSWORD_LENGTH = 6


def is_valid_email(email: str | None) -> bool:
    if not email or not is_encodable(email):
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_encodable(value: str) -> bool:
    """False for strings bcrypt and BSON cannot take, e.g. lone surrogates."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def require_valid_email(email: str | None, message: str = "Invalid email") -> str:
    if not is_valid_email(email):
        raise ValidationError(message)
    return email


def require_encodable(value: str, message: str) -> str:
    if not is_encodable(value):
        raise ValidationError(message)
    return value


def require_password_strength(password: str | None) -> str:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise WeakPasswordError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return require_encodable(password, "Invalid password")
