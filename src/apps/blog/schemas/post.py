"""Post schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from src.apps.blog.models.post import Post

CREATED_FORMAT = "%Y-%m-%d %H:%M:%S"


class PostCreate(BaseModel):
    """Schema for creating a post.

    ``title`` is optional at the parsing layer so that a missing title is
    reported by the service with the same message as an empty one.
    """
    title: Optional[str] = None


class PostUpdate(PostCreate):
    """Schema for updating a post."""


class PostResource(BaseModel):
    """JSON representation of a post."""
    id: int
    title: str
    created: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, post: Post) -> "PostResource":
        return cls(
            id=post.id,  # type: ignore
            title=post.title,
            created=post.created_at.strftime(CREATED_FORMAT),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
