from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.post import Post, Like, Comment


class PostCreateRequest(BaseModel):
    """DTO for post creation request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1, max_length=10000)


class CommentCreateRequest(BaseModel):
    """DTO for comment creation request"""
    model_config = ConfigDict(str_strip_whitespace=True)

    text: str = Field(min_length=1, max_length=5000)


class LikeResponse(BaseModel):
    user_id: str

    @classmethod
    def from_domain(cls, like: Like) -> "LikeResponse":
        return cls(user_id=like.user_id)


class CommentResponse(BaseModel):
    id: str
    user_id: str
    name: str
    avatar: str
    text: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            user_id=comment.user_id,
            name=comment.name,
            avatar=comment.avatar,
            text=comment.text,
            created_at=comment.created_at,
        )


class PostResponse(BaseModel):
    """DTO for post response; likes and comments are newest first"""
    id: str
    user_id: str
    name: str
    avatar: str
    text: str
    likes: List[LikeResponse] = Field(default_factory=list)
    comments: List[CommentResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id or "",
            user_id=post.user_id,
            name=post.name,
            avatar=post.avatar,
            text=post.text,
            likes=[LikeResponse.from_domain(like) for like in post.likes],
            comments=[CommentResponse.from_domain(comment) for comment in post.comments],
            created_at=post.created_at,
        )


class MessageResponse(BaseModel):
    msg: str
