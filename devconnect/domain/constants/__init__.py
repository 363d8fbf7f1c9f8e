"""Constants for domain model field names"""

from .user_fields import UserFields
from .profile_fields import ProfileFields, SocialFields, EntryFields
from .post_fields import PostFields

__all__ = [
    "UserFields",
    "ProfileFields",
    "SocialFields",
    "EntryFields",
    "PostFields",
]
