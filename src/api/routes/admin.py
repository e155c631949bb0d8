"""Admin session routes."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_settings
from api.models import AdminAuthResponse, AdminSessionResponse
from api.security import TokenIssuer, create_admin_token, get_current_admin, get_token_issuer
from services import auth_service
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/admin", tags=["admin"])


async def _read_credentials(request: Request) -> tuple[Any, Any]:
    # Any body shape is accepted; anything that is not a JSON object
    # simply carries no credentials and is rejected as 401 downstream.
    try:
        body = await request.json()
    except ValueError:
        return None, None
    if not isinstance(body, dict):
        return None, None
    return body.get("email"), body.get("password")


@router.post("", response_model=AdminAuthResponse)
async def admin_login(
    request: Request,
    settings: Settings = Depends(get_settings),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Exchange the configured admin credentials for a one-hour admin token."""
    email, password = await _read_credentials(request)
    admin_email = auth_service.authenticate_admin(
        settings.admin_email, settings.admin_password, email, password,
    )
    return AdminAuthResponse(token=create_admin_token(issuer, admin_email))


@router.get("/me", response_model=AdminSessionResponse)
async def admin_session(admin_email: str = Depends(get_current_admin)):
    """Confirm that the bearer holds a valid admin token."""
    return AdminSessionResponse(email=admin_email)
