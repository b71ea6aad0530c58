import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.database.records import Record, new_id, unique_ids, utc_now


class GroupPost(BaseModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    content: str
    timestamp: dt.datetime = Field(default_factory=utc_now)
    replies: List[dict] = Field(default_factory=list)


class Meeting(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    datetime: Optional[dt.datetime] = None
    location: str = "Online"
    scheduled_by: str
    attendees: List[str] = Field(default_factory=list)
    created_at: dt.datetime = Field(default_factory=utc_now)


class StudyGroup(Record):
    """
    Stored in study_groups.json.

    A group with no members is removed rather than persisted. posts and
    meetings are append-only.
    """

    name: str
    description: str
    subject: str
    max_members: int = 10
    schedule: str = ""
    created_by: str
    members: List[str] = Field(default_factory=list)
    posts: List[GroupPost] = Field(default_factory=list)
    meetings: List[Meeting] = Field(default_factory=list)

    @field_validator("members")
    @classmethod
    def _dedupe(cls, value: List[str]) -> List[str]:
        return unique_ids(value)

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.max_members
