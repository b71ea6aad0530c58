from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional
from datetime import datetime

from app.config import settings
from app.database.records import unique_ids
from app.modules.users.schemas import UserResponse


class MatchFilter(BaseModel):
    """Hard constraints applied before peers are scored."""

    min_age: int = Field(
        default_factory=lambda: settings.match_default_min_age, ge=0,
        validation_alias=AliasChoices("min_age", "minAge")
    )
    max_age: int = Field(
        default_factory=lambda: settings.match_default_max_age, ge=0,
        validation_alias=AliasChoices("max_age", "maxAge")
    )
    distance_km: float = Field(
        default_factory=lambda: settings.match_default_distance_km, ge=0,
        validation_alias=AliasChoices("distance_km", "distanceKm")
    )
    interests: List[str] = Field(default_factory=list)

    @field_validator("interests")
    @classmethod
    def _clean_interests(cls, value: List[str]) -> List[str]:
        return unique_ids(v.strip() for v in value if v and v.strip())

    @model_validator(mode="after")
    def check_age_range(self):
        if self.min_age > self.max_age:
            raise ValueError("min_age cannot be greater than max_age")
        return self


class MatchedPeerResponse(UserResponse):
    distance_km: float
    match_score: int
    common_interests: List[str] = []


class WaveCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to_peer_id: str = Field(..., alias="toPeerId")
    message: str = ""


class WaveResponse(BaseModel):
    id: str
    from_user_id: str
    from_name: Optional[str] = None
    message: str
    timestamp: datetime
    read: bool

    class Config:
        from_attributes = True
