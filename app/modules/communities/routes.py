from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.communities.models import Community
from app.modules.communities.schemas import CommunityCreate
from app.modules.communities.service import CommunityService
from app.modules.events.models import Event
from typing import List

router = APIRouter(prefix="/communities", tags=["communities"])


def get_community_service(store: RecordStore = Depends(get_store)) -> CommunityService:
    return CommunityService(store)


@router.get("", response_model=List[Community])
async def list_communities(service: CommunityService = Depends(get_community_service)):
    return service.list_communities()


@router.get("/{community_id}", response_model=Community)
async def get_community(
    community_id: str,
    service: CommunityService = Depends(get_community_service)
):
    return service.get_community_by_id(community_id)


@router.get("/{community_id}/events", response_model=List[Event])
async def list_community_events(
    community_id: str,
    service: CommunityService = Depends(get_community_service)
):
    """Events attached to this community"""
    return service.list_community_events(community_id)


@router.post("", response_model=Community, status_code=201)
async def create_community(
    community_data: CommunityCreate,
    user_id: str = Depends(get_current_user_id),
    service: CommunityService = Depends(get_community_service)
):
    """Create a community; the caller becomes organizer and first member"""
    return service.create_community(community_data, user_id)


@router.post("/{community_id}/join", response_model=Community)
async def join_community(
    community_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CommunityService = Depends(get_community_service)
):
    return service.join(community_id, user_id)


@router.post("/{community_id}/leave", response_model=Community)
async def leave_community(
    community_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CommunityService = Depends(get_community_service)
):
    """Leave a community (organizers cannot)"""
    return service.leave(community_id, user_id)
