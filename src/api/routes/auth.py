"""User authentication routes.

- POST /api/users/register: create account, return session token
- POST /api/users/login: return session token
- POST /api/users/logout: stateless no-op
- GET  /api/users/me: profile of the token's subject
- POST /api/users/forgot: email a password-reset link
- POST /api/users/reset/{token}: set a new password with a reset token

Handlers are plain ``def`` so bcrypt and blocking store/SMTP calls run in
the threadpool. Domain errors propagate to the handlers in api.errors.
"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_mailer, get_settings, get_user_repo
from api.models import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    ProfileResponse,
    RegisterRequest,
    ResetPasswordRequest,
)
from api.security import (
    TokenIssuer,
    create_user_token,
    get_current_user_required,
    get_token_issuer,
    to_user_response,
)
from domain.model.user import User
from port.mailer import MailerPort
from port.user_repository import UserRepository
from services import auth_service, password_reset_service
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    mailer: MailerPort = Depends(get_mailer),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Register a new user.

    Returns:
        Session token and public user info

    Raises:
        400 missing field or invalid email, 409 duplicate email, 500 store error
    """
    user = auth_service.register(repo, mailer, request.name, request.email, request.password)
    return AuthResponse(token=create_user_token(issuer, user.id), user=to_user_response(user))


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Login user and return a session token.

    Raises:
        404 email not found, 401 password mismatch, 500 store error
    """
    user = auth_service.authenticate(repo, request.email, request.password)
    return AuthResponse(token=create_user_token(issuer, user.id), user=to_user_response(user))


@router.post("/logout", response_model=MessageResponse)
def logout():
    """Tokens are stateless; the client discards its copy."""
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=ProfileResponse)
def get_me(current_user: User = Depends(get_current_user_required)):
    """Get current authenticated user info (without password hash)."""
    return ProfileResponse(user=to_user_response(current_user))


@router.post("/forgot", response_model=MessageResponse)
def forgot_password(
    request: ForgotPasswordRequest,
    repo: UserRepository = Depends(get_user_repo),
    mailer: MailerPort = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    """Send a password-reset link.

    Reports success when email is disabled; the token is still stored.

    Raises:
        400 invalid email, 404 email not found, 500 mail or store failure
    """
    password_reset_service.request_password_reset(repo, mailer, request.email, settings.website_url)
    return MessageResponse(message="Email sent")


@router.post("/reset/{token}", response_model=MessageResponse)
def reset_password(
    token: str,
    request: ResetPasswordRequest,
    repo: UserRepository = Depends(get_user_repo),
):
    """Set a new password using a reset token.

    Raises:
        400 weak password, 400 invalid or expired token
    """
    password_reset_service.reset_password(repo, token, request.password)
    return MessageResponse(message="Password reset successful")
