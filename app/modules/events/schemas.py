from pydantic import BaseModel, Field
from typing import Optional
import datetime as dt

from app.database.records import Location


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    date: dt.date
    time: Optional[str] = Field(None, pattern=r"^\d{1,2}:\d{2}$")
    location: str = ""
    category: str = ""
    max_attendees: Optional[int] = Field(None, ge=1)
    community_id: Optional[str] = None
    coordinates: Optional[Location] = None
    external_url: Optional[str] = None
    price: float = Field(0, ge=0)
