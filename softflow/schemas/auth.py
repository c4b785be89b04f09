from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, constr

from .validation import OptionalStr

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 72  # bcrypt limit


class RegisterRequest(BaseModel):
    username: constr(min_length=3, max_length=100, strip_whitespace=True)
    password: constr(min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)
    email: Optional[EmailStr] = None
    phone: OptionalStr = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jane",
                "password": "s3cretpass",
                "email": "jane@example.com",
            }
        }
    )


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: int
    username: str
    email: Optional[str] = None
    phone: Optional[str] = None
    is_admin: bool = False
    is_verified: bool = False
    is_blocked: bool = False
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    user: UserResponse


class BlockUpdate(BaseModel):
    blocked: bool


class GateDecisionOut(BaseModel):
    action: str
    location: Optional[str] = None
    authenticated: bool
    is_admin: bool
    username: Optional[str] = None
