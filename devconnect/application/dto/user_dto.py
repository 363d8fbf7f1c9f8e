from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: EmailStr
    avatar_url: str = ""
