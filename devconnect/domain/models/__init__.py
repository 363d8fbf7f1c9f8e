from .user import User
from .caller import CallerIdentity
from .profile import Profile, Experience, Education, SocialLinks, normalize_skills
from .post import Post, Like, Comment

__all__ = [
    "User",
    "CallerIdentity",
    "Profile",
    "Experience",
    "Education",
    "SocialLinks",
    "normalize_skills",
    "Post",
    "Like",
    "Comment",
]
