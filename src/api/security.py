"""JWT session tokens and the authentication dependencies built on them."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from api.dependencies import get_settings, get_user_repo
from api.models import UserResponse
from domain.model.user import User
from port.user_repository import UserRepository
from utils.config import Settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
USER_TOKEN_TTL = timedelta(days=30)
ADMIN_TOKEN_TTL = timedelta(hours=1)

security = HTTPBearer(auto_error=False)


class InvalidTokenError(Exception):
    """Token is malformed, has a bad signature, or has expired."""


class TokenIssuer:
    """Signs and verifies compact session tokens with one process-wide key."""

    def __init__(self, secret: str, algorithm: str = JWT_ALGORITHM):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm

    def issue(self, claims: dict[str, Any], ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + ttl}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """Return the token's claims.

        Raises:
            InvalidTokenError: signature invalid, token malformed, or expired
        """
        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError(str(e)) from e


def create_user_token(issuer: TokenIssuer, user_id: str) -> str:
    return issuer.issue({"sub": user_id}, USER_TOKEN_TTL)


def create_admin_token(issuer: TokenIssuer, email: str) -> str:
    return issuer.issue({"email": email}, ADMIN_TOKEN_TTL)


def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    return TokenIssuer(settings.jwt_secret)


def to_user_response(user: User) -> UserResponse:
    """Convert domain User to API UserResponse (no hash, no reset fields)."""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _verified_claims(
    credentials: Optional[HTTPAuthorizationCredentials],
    issuer: TokenIssuer,
) -> dict[str, Any]:
    if not credentials:
        raise _unauthorized("Not authenticated")
    try:
        return issuer.verify(credentials.credentials)
    except InvalidTokenError:
        raise _unauthorized("Invalid authentication credentials")


def get_token_subject(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> str:
    """User id from a valid user token. Raises 401 otherwise."""
    claims = _verified_claims(credentials, issuer)

    user_id = claims.get("sub")
    if not user_id:
        raise _unauthorized("Invalid authentication credentials")
    return user_id


def get_current_user_required(
    # Resolved before the repository: token errors take precedence over store errors
    user_id: str = Depends(get_token_subject),
    user_repo: UserRepository = Depends(get_user_repo),
) -> User:
    """Get current authenticated user (required). Raises 401 if not authenticated."""
    user = user_repo.get_by_id(user_id)
    if not user:
        raise _unauthorized("User not found")

    return user


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    issuer: TokenIssuer = Depends(get_token_issuer),
    settings: Settings = Depends(get_settings),
) -> str:
    """Return the admin email from a valid admin token. Raises 401 otherwise."""
    claims = _verified_claims(credentials, issuer)

    email = claims.get("email")
    if not email or not settings.admin_email or email != settings.admin_email:
        raise _unauthorized("Admin authentication required")

    return email
