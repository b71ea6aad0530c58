from pydantic import BaseModel
from typing import Optional

from app.modules.posts.models import Comment, Post


class PostCreate(BaseModel):
    content: str
    type: str = "text"
    media_url: Optional[str] = None


class CommentCreate(BaseModel):
    content: str


class AuthorSummary(BaseModel):
    id: str
    name: str
    email: str = ""


class PostResponse(Post):
    author: AuthorSummary


class CommentResponse(Comment):
    author: AuthorSummary


class LikeResponse(BaseModel):
    message: str
    likes: int
    is_liked: bool
