from dataclasses import dataclass
from typing import Optional

from ...core.errors import ValidationError


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    avatar_url: str = ""

    def __post_init__(self):
        """Business validations"""
        if not self.name or not self.name.strip():
            raise ValidationError.for_field("name", "Name is required")
        if not self.email or "@" not in self.email:
            raise ValidationError.for_field("email", "Invalid email format")
        if not self.hashed_password:
            raise ValidationError.for_field("password", "Password hash is required")
