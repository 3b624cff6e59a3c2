"""
Authentication Request/Response Schemas
Pydantic v2 models; field rules live in the auth service so every
error is reported at once
"""
from pydantic import BaseModel, Field

from application.services.auth.interfaces import AuthResult


class RegisterRequest(BaseModel):
    """Registration form"""

    email: str = ""
    name: str = ""
    password: str = Field(default="", repr=False)


class LoginRequest(BaseModel):
    """Login form"""

    email: str = ""
    password: str = Field(default="", repr=False)


class AuthUserResponse(BaseModel):
    """Authenticated user with a fresh token"""

    id: str
    name: str
    email: str
    token: str


class AuthResponse(BaseModel):
    user: AuthUserResponse

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            user=AuthUserResponse(
                id=str(result.user_id),
                name=result.name,
                email=result.email,
                token=result.token
            )
        )
