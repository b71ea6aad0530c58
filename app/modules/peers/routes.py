from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError
from app.core.dependencies import get_current_user
from app.core.exceptions import ValidationFailedError
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.peers.schemas import MatchFilter, MatchedPeerResponse, WaveCreate, WaveResponse
from app.modules.peers.service import PeerService
from app.modules.users.models import User
from app.modules.users.schemas import UserResponse
from typing import List, Optional

router = APIRouter(prefix="/peers", tags=["peers"])


def get_peer_service(store: RecordStore = Depends(get_store)) -> PeerService:
    return PeerService(store)


def get_match_filter(
    min_age: Optional[int] = None,
    max_age: Optional[int] = None,
    distance_km: Optional[float] = None,
    interests: List[str] = Query(default=[])
) -> MatchFilter:
    """Build a MatchFilter from query parameters; interests may repeat or be comma separated"""
    values = {
        k: v for k, v in {"min_age": min_age, "max_age": max_age, "distance_km": distance_km}.items()
        if v is not None
    }
    values["interests"] = [part for item in interests for part in item.split(",")]
    try:
        return MatchFilter(**values)
    except ValidationError as e:
        raise ValidationFailedError(e.errors()[0]["msg"])


@router.get("/all", response_model=List[UserResponse])
async def list_peers(
    current_user: User = Depends(get_current_user),
    service: PeerService = Depends(get_peer_service)
):
    """All users without credentials"""
    return service.list_peers()


@router.get("/matches", response_model=List[MatchedPeerResponse])
async def find_matches(
    match_filter: MatchFilter = Depends(get_match_filter),
    current_user: User = Depends(get_current_user),
    service: PeerService = Depends(get_peer_service)
):
    """Nearby peers matching the filter, best match first"""
    return service.find_matches(current_user, match_filter)


@router.post("/matches", response_model=List[MatchedPeerResponse])
async def find_matches_with_body(
    match_filter: MatchFilter,
    current_user: User = Depends(get_current_user),
    service: PeerService = Depends(get_peer_service)
):
    """Same as GET /matches with the filter in the request body"""
    return service.find_matches(current_user, match_filter)


@router.post("/wave", response_model=WaveResponse, status_code=201)
async def send_wave(
    wave_data: WaveCreate,
    current_user: User = Depends(get_current_user),
    service: PeerService = Depends(get_peer_service)
):
    """Wave at another user"""
    return service.send_wave(current_user, wave_data)


@router.get("/waves", response_model=List[WaveResponse])
async def list_waves(
    current_user: User = Depends(get_current_user),
    service: PeerService = Depends(get_peer_service)
):
    """Waves received by the current user"""
    return service.list_waves(current_user)


@router.post("/waves/{wave_id}/read", response_model=WaveResponse)
async def mark_wave_read(
    wave_id: str,
    current_user: User = Depends(get_current_user),
    service: PeerService = Depends(get_peer_service)
):
    return service.mark_wave_read(current_user, wave_id)
