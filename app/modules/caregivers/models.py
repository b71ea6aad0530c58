import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from app.database.records import Record, new_id


class CaregiverLocation(BaseModel):
    area: str = ""
    lat: float = 0.0
    lng: float = 0.0


class CaregiverUpdate(BaseModel):
    id: str = Field(default_factory=new_id)
    date: dt.date = Field(default_factory=dt.date.today)
    message: str


class Caregiver(Record):
    """
    Stored in caregivers.json.

    rating and reviews are carried as-is; nothing recomputes them.
    updates is newest first.
    """

    user_id: str
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    bio: str = ""
    services: List[str] = Field(default_factory=list)
    hourly_rate: float = 0
    availability: str = ""
    location: CaregiverLocation = Field(default_factory=CaregiverLocation)
    experience: str = "0 years"
    certifications: List[str] = Field(default_factory=list)
    rating: float = 0
    reviews: int = 0
    verified: bool = False
    updates: List[CaregiverUpdate] = Field(default_factory=list)
    updated_at: Optional[dt.datetime] = None
