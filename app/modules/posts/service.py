from app.database.json_store import RecordStore
from app.database.records import utc_now
from app.core.dependencies import check_owner
from app.core.exceptions import NotFoundError, ValidationFailedError
from app.modules.posts.models import Comment, Post
from app.modules.posts.schemas import (
    AuthorSummary, CommentCreate, CommentResponse, LikeResponse, PostCreate, PostResponse
)
from typing import List
import logging

logger = logging.getLogger(__name__)

MEDIA_TYPES = {".jpg": "photo", ".jpeg": "photo", ".png": "photo", ".gif": "photo",
               ".mp4": "video", ".avi": "video", ".mov": "video", ".wmv": "video", ".webm": "video"}


class PostService:
    def __init__(self, store: RecordStore):
        self.store = store

    def _author(self, user_id: str) -> AuthorSummary:
        user = self.store.users.get(user_id)
        if user is None:
            return AuthorSummary(id=user_id, name="Unknown User")
        return AuthorSummary(id=user.id, name=user.name, email=user.email)

    def _with_author(self, post: Post) -> PostResponse:
        return PostResponse(**post.model_dump(), author=self._author(post.user_id))

    def _get_post(self, post_id: str) -> Post:
        post = self.store.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def list_posts(self) -> List[PostResponse]:
        """All posts, newest first"""
        posts = sorted(self.store.posts, key=lambda p: p.created_at, reverse=True)
        return [self._with_author(p) for p in posts]

    def get_post(self, post_id: str) -> PostResponse:
        return self._with_author(self._get_post(post_id))

    def create_post(self, post_data: PostCreate, user_id: str) -> PostResponse:
        content = post_data.content.strip()
        if not content:
            raise ValidationFailedError("Content is required")
        post_type = post_data.type
        if post_data.media_url:
            suffix = post_data.media_url.rsplit(".", 1)[-1].lower()
            post_type = MEDIA_TYPES.get(f".{suffix}", post_type)
        with self.store.transaction(self.store.posts):
            post = self.store.posts.add(Post(
                user_id=user_id,
                content=content,
                type=post_type,
                media_url=post_data.media_url
            ))
        logger.info(f"Post {post.id} created by {user_id}")
        return self._with_author(post)

    def toggle_like(self, post_id: str, user_id: str) -> LikeResponse:
        """Like the post, or unlike it if already liked"""
        with self.store.transaction(self.store.posts):
            post = self._get_post(post_id)
            liked = user_id not in post.likes
            if liked:
                post.likes.append(user_id)
            else:
                post.likes.remove(user_id)
            post.updated_at = utc_now()
        return LikeResponse(
            message="Post liked" if liked else "Post unliked",
            likes=len(post.likes),
            is_liked=liked
        )

    def add_comment(self, post_id: str, comment_data: CommentCreate, user_id: str) -> CommentResponse:
        content = comment_data.content.strip()
        if not content:
            raise ValidationFailedError("Comment content is required")
        with self.store.transaction(self.store.posts):
            post = self._get_post(post_id)
            comment = Comment(user_id=user_id, content=content)
            post.comments.append(comment)
            post.updated_at = utc_now()
        return CommentResponse(**comment.model_dump(), author=self._author(user_id))

    def delete_post(self, post_id: str, user_id: str) -> None:
        with self.store.transaction(self.store.posts):
            post = self._get_post(post_id)
            check_owner(post.user_id, user_id, "Not authorized to delete this post")
            self.store.posts.remove(post)
        logger.info(f"Post {post_id} deleted by {user_id}")
