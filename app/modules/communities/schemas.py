from pydantic import BaseModel, Field


class CommunityCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    category: str = ""
    location: str = ""
