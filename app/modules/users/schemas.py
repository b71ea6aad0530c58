from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from app.database.records import Location, unique_ids


class UserUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    area: Optional[str] = None
    bio: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    interests: Optional[List[str]] = None
    hobbies: Optional[List[str]] = None
    location: Optional[Location] = None

    @field_validator("interests", "hobbies")
    @classmethod
    def _dedupe(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return None if value is None else unique_ids(v.strip() for v in value if v.strip())


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    area: Optional[str] = None
    bio: Optional[str] = None
    age: Optional[int] = None
    interests: List[str] = []
    hobbies: List[str] = []
    location: Optional[Location] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
