"""Process-wide configuration sourced from environment variables."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_WEBSITE_URL = "http://localhost:3000"
DEFAULT_FROM_EMAIL = "no-reply@example.com"


def _get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() == "true"


def _get_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


@dataclass(frozen=True)
class Settings:
    """Immutable application settings.

    Built once at startup by ``from_env`` and handed to the components that
    need it (token issuer, mailer, LLM adapter) through FastAPI dependencies.
    """
    jwt_secret: str
    mongo_url: str | None = None
    database_name: str = "urbansquare"
    enable_email: bool = False
    email_user: str | None = None
    email_password: str | None = None
    email_from: str = DEFAULT_FROM_EMAIL
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    website_url: str = DEFAULT_WEBSITE_URL
    admin_email: str | None = None
    admin_password: str | None = None
    openai_api_key: str | None = None
    llm_model: str = "openai/gpt-4o"

    @property
    def llm_enabled(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def admin_configured(self) -> bool:
        return bool(self.admin_email and self.admin_password)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from the environment (and a ``.env`` file if present).

        Raises:
            ValueError: JWT_SECRET is missing or an integer variable is malformed.
        """
        load_dotenv()

        jwt_secret = os.getenv("JWT_SECRET")
        if not jwt_secret:
            raise ValueError(
                "JWT_SECRET environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )

        email_user = os.getenv("EMAIL") or None

        return cls(
            jwt_secret=jwt_secret,
            mongo_url=os.getenv("MONGO_URL") or None,
            database_name=os.getenv("MONGODB_DATABASE", "urbansquare"),
            enable_email=_get_bool("ENABLE_EMAIL"),
            email_user=email_user,
            email_password=os.getenv("EMAIL_PASS") or None,
            email_from=os.getenv("EMAIL_FROM") or email_user or DEFAULT_FROM_EMAIL,
            smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=_get_int("SMTP_PORT", 587),
            website_url=os.getenv("WEBSITE_URL", DEFAULT_WEBSITE_URL).rstrip("/"),
            admin_email=os.getenv("ADMIN_EMAIL") or None,
            admin_password=os.getenv("ADMIN_PASSWORD") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            llm_model=os.getenv("LLM_MODEL", "openai/gpt-4o"),
        )
