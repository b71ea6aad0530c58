from app.config import settings
from app.database.json_store import RecordStore
from app.database.records import utc_now
from app.core.dependencies import check_owner
from app.core.exceptions import NotFoundError
from app.modules.caregivers.models import Caregiver, CaregiverUpdate
from app.modules.caregivers.schemas import (
    CaregiverCreate, CaregiverUpdateRequest, CaregiverFeedPost,
    CaregiverContact, ContactResponse, NearbyCaregiverResponse
)
from app.modules.peers.geo import distance_sort_key, haversine_km
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class CaregiverService:
    def __init__(self, store: RecordStore):
        self.store = store

    def list_caregivers(
        self,
        area: Optional[str] = None,
        service: Optional[str] = None,
        min_rating: Optional[float] = None
    ) -> List[Caregiver]:
        """List caregivers by area substring, service substring and minimum rating"""
        caregivers = self.store.caregivers.all()
        if area:
            area = area.lower()
            caregivers = [cg for cg in caregivers if area in cg.location.area.lower()]
        if service:
            service = service.lower()
            caregivers = [cg for cg in caregivers if any(service in s.lower() for s in cg.services)]
        if min_rating is not None:
            caregivers = [cg for cg in caregivers if cg.rating >= min_rating]
        return caregivers

    def get_caregiver_by_id(self, caregiver_id: str) -> Caregiver:
        caregiver = self.store.caregivers.get(caregiver_id)
        if caregiver is None:
            raise NotFoundError("Caregiver not found")
        return caregiver

    def register(self, caregiver_data: CaregiverCreate, user_id: str) -> Caregiver:
        """Create a caregiver profile owned by user_id"""
        with self.store.transaction(self.store.caregivers):
            caregiver = self.store.caregivers.add(Caregiver(**caregiver_data.model_dump(), user_id=user_id))
        logger.info(f"Caregiver {caregiver.id} registered by {user_id}")
        return caregiver

    def update_caregiver(self, caregiver_id: str, caregiver_data: CaregiverUpdateRequest, user_id: str) -> Caregiver:
        with self.store.transaction(self.store.caregivers):
            caregiver = self.get_caregiver_by_id(caregiver_id)
            check_owner(caregiver.user_id, user_id, "You can only update your own caregiver profile")
            for field in caregiver_data.model_dump(exclude_unset=True, exclude_none=True):
                setattr(caregiver, field, getattr(caregiver_data, field))
            caregiver.updated_at = utc_now()
        return caregiver

    def add_update(self, caregiver_id: str, post: CaregiverFeedPost, user_id: str) -> CaregiverUpdate:
        """Prepend an entry to the caregiver's update feed"""
        with self.store.transaction(self.store.caregivers):
            caregiver = self.get_caregiver_by_id(caregiver_id)
            check_owner(caregiver.user_id, user_id, "You can only post updates to your own profile")
            update = CaregiverUpdate(message=post.message)
            caregiver.updates.insert(0, update)
        return update

    def contact(self, caregiver_id: str, user_id: str) -> ContactResponse:
        caregiver = self.get_caregiver_by_id(caregiver_id)
        logger.info(f"Contact request from {user_id} to caregiver {caregiver_id}")
        return ContactResponse(
            message="Contact request sent successfully",
            contact=CaregiverContact(name=caregiver.name, phone=caregiver.phone, email=caregiver.email)
        )

    def find_nearby(self, lat: float, lng: float, radius_km: Optional[float] = None) -> List[NearbyCaregiverResponse]:
        """Caregivers within radius_km of (lat, lng), nearest first"""
        if radius_km is None:
            radius_km = settings.caregiver_nearby_radius_km
        nearby = []
        for caregiver in self.store.caregivers:
            distance = round(haversine_km(lat, lng, caregiver.location.lat, caregiver.location.lng), 2)
            if distance <= radius_km:
                nearby.append(NearbyCaregiverResponse(**caregiver.model_dump(), distance_km=distance))
        return sorted(nearby, key=lambda cg: distance_sort_key(cg.distance_km))
