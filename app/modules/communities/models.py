from typing import List

from pydantic import Field, field_validator, model_validator

from app.database.records import Record, unique_ids


class Community(Record):
    """Stored in communities.json. The organizer is always a member."""

    name: str
    description: str = ""
    category: str = ""
    location: str = ""
    organizer_id: str
    members: List[str] = Field(default_factory=list)

    @field_validator("members")
    @classmethod
    def _dedupe(cls, value: List[str]) -> List[str]:
        return unique_ids(value)

    @model_validator(mode="after")
    def _organizer_is_member(self):
        if self.organizer_id not in self.members:
            self.members.insert(0, self.organizer_id)
        return self
