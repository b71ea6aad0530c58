from fastapi import APIRouter, Depends, Query
from app.core.dependencies import get_current_user_id
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.caregivers.models import Caregiver, CaregiverUpdate
from app.modules.caregivers.schemas import (
    CaregiverCreate, CaregiverUpdateRequest, CaregiverFeedPost,
    ContactResponse, NearbyCaregiverResponse
)
from app.modules.caregivers.service import CaregiverService
from typing import List, Optional

router = APIRouter(prefix="/caregivers", tags=["caregivers"])


def get_caregiver_service(store: RecordStore = Depends(get_store)) -> CaregiverService:
    return CaregiverService(store)


@router.get("", response_model=List[Caregiver])
async def list_caregivers(
    area: Optional[str] = None,
    service_name: Optional[str] = Query(None, alias="service"),
    min_rating: Optional[float] = None,
    service: CaregiverService = Depends(get_caregiver_service)
):
    """List caregivers by area, offered service and minimum rating"""
    return service.list_caregivers(area=area, service=service_name, min_rating=min_rating)


@router.get("/nearby/{lat}/{lng}", response_model=List[NearbyCaregiverResponse])
async def find_nearby_caregivers(
    lat: float,
    lng: float,
    radius: Optional[float] = None,
    service: CaregiverService = Depends(get_caregiver_service)
):
    """Caregivers within radius km (default from settings), nearest first"""
    return service.find_nearby(lat, lng, radius)


@router.get("/{caregiver_id}", response_model=Caregiver)
async def get_caregiver(
    caregiver_id: str,
    service: CaregiverService = Depends(get_caregiver_service)
):
    return service.get_caregiver_by_id(caregiver_id)


@router.post("/register", response_model=Caregiver, status_code=201)
async def register_caregiver(
    caregiver_data: CaregiverCreate,
    user_id: str = Depends(get_current_user_id),
    service: CaregiverService = Depends(get_caregiver_service)
):
    """Register the caller as a caregiver"""
    return service.register(caregiver_data, user_id)


@router.put("/{caregiver_id}", response_model=Caregiver)
async def update_caregiver(
    caregiver_id: str,
    caregiver_data: CaregiverUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    service: CaregiverService = Depends(get_caregiver_service)
):
    """Update a caregiver profile (owner only)"""
    return service.update_caregiver(caregiver_id, caregiver_data, user_id)


@router.post("/{caregiver_id}/updates", response_model=CaregiverUpdate, status_code=201)
async def add_caregiver_update(
    caregiver_id: str,
    post: CaregiverFeedPost,
    user_id: str = Depends(get_current_user_id),
    service: CaregiverService = Depends(get_caregiver_service)
):
    return service.add_update(caregiver_id, post, user_id)


@router.post("/{caregiver_id}/contact", response_model=ContactResponse)
async def contact_caregiver(
    caregiver_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CaregiverService = Depends(get_caregiver_service)
):
    """Request contact details for a caregiver"""
    return service.contact(caregiver_id, user_id)
