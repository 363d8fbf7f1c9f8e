from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    # bcrypt only looks at the first 72 bytes
    password: str = Field(min_length=6, max_length=72)
    avatar_url: Optional[str] = Field(default=None, max_length=2048)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
