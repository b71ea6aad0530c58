from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.database.records import Record, new_id, unique_ids, utc_now


class Comment(BaseModel):
    id: str = Field(default_factory=new_id)
    user_id: str
    content: str
    created_at: datetime = Field(default_factory=utc_now)


class Post(Record):
    """Stored in posts.json. likes is a toggle set of user ids."""

    user_id: str
    content: str
    type: str = "text"  # text | photo | video
    media_url: Optional[str] = None
    likes: List[str] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("likes")
    @classmethod
    def _dedupe(cls, value: List[str]) -> List[str]:
        return unique_ids(value)
