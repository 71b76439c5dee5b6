"""Authentication models"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class LoginCredentials(BaseModel):
    email: str
    password: str


class RegisterData(BaseModel):
    email: str
    password: str
    first_name: str
    last_name: str


class AuthUser(BaseModel):
    """User record returned by the auth API"""
    id: str
    email: Optional[str] = None
    user_metadata: dict = {}

    model_config = ConfigDict(extra="ignore")


class AuthResponse(BaseModel):
    """Token grant returned by the auth API"""
    access_token: str
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    user: AuthUser

    model_config = ConfigDict(extra="ignore")
