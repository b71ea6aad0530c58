from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.modules.events.models import Event
from app.modules.events.schemas import EventCreate
from app.modules.events.service import EventService
from typing import List, Optional

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service(store: RecordStore = Depends(get_store)) -> EventService:
    return EventService(store)


@router.get("", response_model=List[Event])
async def list_events(
    category: Optional[str] = None,
    search: Optional[str] = None,
    service: EventService = Depends(get_event_service)
):
    """List events, filtered by category and/or search text"""
    return service.list_events(category=category, search=search)


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: str,
    service: EventService = Depends(get_event_service)
):
    return service.get_event_by_id(event_id)


@router.post("", response_model=Event, status_code=201)
async def create_event(
    event_data: EventCreate,
    user_id: str = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service)
):
    """Create an event; the caller becomes the organizer"""
    return service.create_event(event_data, user_id)


@router.post("/{event_id}/rsvp", response_model=Event)
async def rsvp(
    event_id: str,
    user_id: str = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service)
):
    """RSVP to an event"""
    return service.rsvp(event_id, user_id)


@router.delete("/{event_id}/rsvp", response_model=Event)
async def cancel_rsvp(
    event_id: str,
    user_id: str = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service)
):
    """Cancel an RSVP"""
    return service.cancel_rsvp(event_id, user_id)
