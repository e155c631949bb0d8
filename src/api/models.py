"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# Request fields are optional so missing values reach the service layer,
# which reports them as 400 with a readable message.

class RegisterRequest(BaseModel):
    """Request model for user registration."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: Optional[str] = None
    password: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = None


class ResetPasswordRequest(BaseModel):
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public view of a user. Never carries the password hash or reset fields."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Response model for register/login."""
    success: bool = True
    token: str
    user: UserResponse


class AdminAuthResponse(BaseModel):
    success: bool = True
    token: str


class AdminSessionResponse(BaseModel):
    success: bool = True
    email: str


class ProfileResponse(BaseModel):
    success: bool = True
    user: UserResponse


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class PropertyAnalysisRequest(BaseModel):
    """Request model for property analysis."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    properties: list[dict[str, Any]] = Field(default_factory=list, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    max_price: str = Field(..., max_length=50, description="Maximum price in crores")
    property_category: str = Field("Residential", max_length=50)
    property_type: str = Field("Flat", max_length=50)


class LocationTrendsRequest(BaseModel):
    """Request model for location price trend analysis."""
    locations: list[dict[str, Any]] = Field(default_factory=list, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)


class AnalysisResponse(BaseModel):
    success: bool = True
    analysis: str
