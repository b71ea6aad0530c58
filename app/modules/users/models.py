from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.database.records import Location, Record, new_id, unique_ids, utc_now


class Wave(BaseModel):
    """A one-way greeting left in the recipient's inbox."""

    id: str = Field(default_factory=new_id)
    from_user_id: str
    from_name: Optional[str] = None
    message: str = ""
    timestamp: datetime = Field(default_factory=utc_now)
    read: bool = False


class User(Record):
    """Stored in users.json. Users are never hard-deleted."""

    name: str
    email: str
    password_hash: str
    phone: Optional[str] = None
    area: Optional[str] = None
    bio: Optional[str] = None
    age: Optional[int] = None
    interests: List[str] = Field(default_factory=list)
    hobbies: List[str] = Field(default_factory=list)
    location: Optional[Location] = None
    waves: List[Wave] = Field(default_factory=list)
    updated_at: Optional[datetime] = None

    @field_validator("interests", "hobbies")
    @classmethod
    def _dedupe(cls, value: List[str]) -> List[str]:
        return unique_ids(value)

    @property
    def has_location(self) -> bool:
        return self.location is not None and self.location.has_coordinates
