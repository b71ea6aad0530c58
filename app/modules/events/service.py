from app.database.json_store import RecordStore
from app.core.exceptions import ConflictError, NotFoundError, ValidationFailedError
from app.modules.events.models import Event
from app.modules.events.schemas import EventCreate
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, store: RecordStore):
        self.store = store

    def list_events(self, category: Optional[str] = None, search: Optional[str] = None) -> List[Event]:
        """List events, optionally by exact category and case-insensitive text search"""
        events = self.store.events.all()
        if category:
            events = [e for e in events if e.category == category]
        if search:
            needle = search.lower()
            events = [
                e for e in events
                if needle in e.title.lower() or needle in e.description.lower()
            ]
        return events

    def get_event_by_id(self, event_id: str) -> Event:
        event = self.store.events.get(event_id)
        if event is None:
            raise NotFoundError("Event not found")
        return event

    def create_event(self, event_data: EventCreate, user_id: str) -> Event:
        """Create an event organized by user_id"""
        title = event_data.title.strip()
        if not title:
            raise ValidationFailedError("Title is required")
        if event_data.community_id and self.store.communities.get(event_data.community_id) is None:
            raise NotFoundError("Community not found")
        with self.store.transaction(self.store.events):
            event = self.store.events.add(Event(
                **event_data.model_dump(exclude={"title"}),
                title=title,
                organizer_id=user_id
            ))
        logger.info(f"Event {event.id} created by {user_id}")
        return event

    def rsvp(self, event_id: str, user_id: str) -> Event:
        """Add user_id to the attendees unless already there or the event is full"""
        with self.store.transaction(self.store.events):
            event = self.get_event_by_id(event_id)
            if user_id in event.attendees:
                raise ConflictError("Already registered for this event")
            if event.is_full:
                raise ConflictError("Event is full")
            event.attendees.append(user_id)
        logger.info(f"RSVP {user_id} -> event {event_id}")
        return event

    def cancel_rsvp(self, event_id: str, user_id: str) -> Event:
        with self.store.transaction(self.store.events):
            event = self.get_event_by_id(event_id)
            if user_id not in event.attendees:
                raise ConflictError("Not registered for this event")
            event.attendees.remove(user_id)
        logger.info(f"RSVP cancelled {user_id} -> event {event_id}")
        return event
