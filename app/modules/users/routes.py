from fastapi import APIRouter, Depends
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.communities.models import Community
from app.modules.events.models import Event
from app.modules.users.models import User
from app.modules.users.schemas import UserUpdate, UserResponse
from app.modules.users.service import UserService
from app.core.dependencies import get_current_user, check_owner
from typing import List

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(store: RecordStore = Depends(get_store)) -> UserService:
    return UserService(store)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service)
):
    """Get a user's public profile"""
    return service.get_user_by_id(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_data_body: UserUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """Update a profile (only your own)"""
    check_owner(user_id, current_user.id, "You can only update your own profile")
    return service.update_user(user_id, user_data_body)


@router.get("/{user_id}/events", response_model=List[Event])
async def get_user_events(
    user_id: str,
    service: UserService = Depends(get_user_service)
):
    """Events the user organizes or has RSVPed to"""
    return service.get_user_events(user_id)


@router.get("/{user_id}/communities", response_model=List[Community])
async def get_user_communities(
    user_id: str,
    service: UserService = Depends(get_user_service)
):
    """Communities the user belongs to"""
    return service.get_user_communities(user_id)
