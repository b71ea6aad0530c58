import datetime as dt
from typing import List, Optional

from pydantic import Field, field_validator

from app.database.records import Location, Record, unique_ids


class Event(Record):
    """
    Stored in events.json.

    attendees keeps RSVP order. An event with external_url is a pass-through
    listing whose registration happens on a third-party page.
    """

    title: str
    description: str = ""
    date: dt.date
    time: Optional[str] = None  # local clock time, "HH:MM"
    location: str = ""
    category: str = ""
    organizer_id: str
    attendees: List[str] = Field(default_factory=list)
    max_attendees: Optional[int] = None
    community_id: Optional[str] = None
    coordinates: Optional[Location] = None
    external_url: Optional[str] = None
    price: float = 0

    @field_validator("attendees")
    @classmethod
    def _dedupe(cls, value: List[str]) -> List[str]:
        return unique_ids(value)

    @property
    def is_full(self) -> bool:
        return bool(self.max_attendees) and len(self.attendees) >= self.max_attendees
