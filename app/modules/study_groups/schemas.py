from pydantic import BaseModel, Field
from typing import Optional
import datetime as dt


class StudyGroupCreate(BaseModel):
    name: str
    description: str
    subject: str
    max_members: Optional[int] = Field(None, ge=1)
    schedule: str = ""


class GroupPostCreate(BaseModel):
    content: str = Field(..., min_length=1)


class MeetingCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    datetime: Optional[dt.datetime] = None
    location: Optional[str] = None


class LeaveResponse(BaseModel):
    message: str
    group_deleted: bool = False
