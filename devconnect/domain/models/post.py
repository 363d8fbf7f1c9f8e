# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ...core.errors import AlreadyLiked, Forbidden, NotFound, NotLiked, ValidationError


@dataclass
class Like:
    user_id: str


@dataclass
class Comment:
    """Comment embedded in a Post; name/avatar are snapshots taken when it was written"""
    id: str
    user_id: str
    text: str
    name: str = ""
    avatar: str = ""
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValidationError.for_field("text", "Text is required")


@dataclass
class Post:
    """
    Post aggregate.

    ``name`` and ``avatar`` are copied from the author at creation time and do
    not follow later changes to the user. Likes and comments are kept newest
    first; at most one like per user.
    """
    id: Optional[str]
    user_id: str
    text: str
    name: str = ""
    avatar: str = ""
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: Optional[datetime] = None
    version: int = 0

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("Owner user ID is required")
        if not self.text or not self.text.strip():
            raise ValidationError.for_field("text", "Text is required")

    def ensure_owned_by(self, user_id: str) -> None:
        if self.user_id != user_id:
            raise Forbidden("User not authorized")

    # Likes ------------------------------------------------------------------

    def has_liked(self, user_id: str) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def like(self, user_id: str) -> None:
        if self.has_liked(user_id):
            raise AlreadyLiked()
        self.likes.insert(0, Like(user_id=user_id))

    def unlike(self, user_id: str) -> None:
        for index, like in enumerate(self.likes):
            if like.user_id == user_id:
                del self.likes[index]
                return
        raise NotLiked()

    # Comments ---------------------------------------------------------------

    def add_comment(self, comment: Comment) -> None:
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: str, user_id: str) -> Comment:
        """
        Remove the comment with ``comment_id``.

        Raises:
            NotFound: no comment with that id on this post
            Forbidden: the comment was written by someone else
        """
        for index, comment in enumerate(self.comments):
            if comment.id == comment_id:
                if comment.user_id != user_id:
                    raise Forbidden("User not authorized")
                return self.comments.pop(index)
        raise NotFound("Comment does not exist")
