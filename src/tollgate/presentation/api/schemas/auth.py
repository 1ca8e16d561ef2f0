"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Password strength is checked by the authentication service so that
    every violated rule is reported at once.
    """

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., max_length=128, description="Password")
    full_name: str = Field(..., min_length=1, max_length=255)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Str0ng!Passw0rd",
                "full_name": "Jane Doe",
            },
        },
    )

    @field_validator("full_name")
    @classmethod
    def _strip_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "Full name must not be blank"
            raise ValueError(msg)
        return v


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Str0ng!Passw0rd",
            },
        },
    )


class RefreshRequest(BaseModel):
    """Request schema for token refresh."""

    refresh_token: str = Field(..., min_length=1)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            },
        },
    )


class UserResponse(BaseModel):
    """Public user data returned with tokens."""

    id: str
    email: str
    role: str
    full_name: str

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    """Response schema for token data."""

    access_token: str
    refresh_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class AuthResponse(TokenResponse):
    """Response schema for authentication (login/register)."""

    user: UserResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 900,
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "email": "user@example.com",
                    "role": "customer",
                    "full_name": "Jane Doe",
                },
            },
        },
    )


class IdentityResponse(BaseModel):
    """The authenticated caller as carried by the access token."""

    id: str
    email: str
    role: str


class ProfileResponse(IdentityResponse):
    message: str = "Profile retrieved successfully"


class AdminResponse(BaseModel):
    message: str = "Admin access granted"
    user: IdentityResponse
    admin_data: dict[str, str]
