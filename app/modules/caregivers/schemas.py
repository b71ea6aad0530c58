from pydantic import BaseModel, Field
from typing import Optional, List

from app.modules.caregivers.models import Caregiver, CaregiverLocation


class CaregiverCreate(BaseModel):
    name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    email: Optional[str] = None
    bio: str = ""
    services: List[str] = []
    hourly_rate: float = Field(0, ge=0)
    availability: str = ""
    location: CaregiverLocation = Field(default_factory=CaregiverLocation)
    experience: str = "0 years"
    certifications: List[str] = []


class CaregiverUpdateRequest(BaseModel):
    """Fields an owner may change. Ratings and identity are not editable."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    services: Optional[List[str]] = None
    hourly_rate: Optional[float] = Field(None, ge=0)
    availability: Optional[str] = None
    location: Optional[CaregiverLocation] = None
    experience: Optional[str] = None
    certifications: Optional[List[str]] = None


class CaregiverFeedPost(BaseModel):
    message: str = Field(..., min_length=1)


class CaregiverContact(BaseModel):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None


class ContactResponse(BaseModel):
    message: str
    contact: CaregiverContact


class NearbyCaregiverResponse(Caregiver):
    distance_km: float
