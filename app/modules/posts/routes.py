from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.posts.schemas import CommentCreate, CommentResponse, LikeResponse, PostCreate, PostResponse
from app.modules.posts.service import PostService
from typing import List

router = APIRouter(prefix="/posts", tags=["posts"])


def get_post_service(store: RecordStore = Depends(get_store)) -> PostService:
    return PostService(store)


@router.get("", response_model=List[PostResponse])
async def list_posts(service: PostService = Depends(get_post_service)):
    """All posts with author info, newest first"""
    return service.list_posts()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    service: PostService = Depends(get_post_service)
):
    return service.get_post(post_id)


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    post_data: PostCreate,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    return service.create_post(post_data, user_id)


@router.post("/{post_id}/like", response_model=LikeResponse)
async def toggle_like(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    """Like or unlike a post"""
    return service.toggle_like(post_id, user_id)


@router.post("/{post_id}/comment", response_model=CommentResponse, status_code=201)
async def add_comment(
    post_id: str,
    comment_data: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    return service.add_comment(post_id, comment_data, user_id)


@router.delete("/{post_id}", status_code=204)
async def delete_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PostService = Depends(get_post_service)
):
    """Delete a post (author only)"""
    service.delete_post(post_id, user_id)
    return None
