"""
Watch party schemas.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel
from app.schemas.movie import MovieSummary


# Only "scheduled" is ever assigned; no transitions are modelled.
WatchPartyStatus = Literal["scheduled"]


class WatchPartyCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=5000)
    date_time: datetime
    movie_ids: List[int] = Field(..., max_length=50)
    is_public: bool = False
    invited_user_ids: List[str] = Field(default_factory=list, max_length=250)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


class WatchParty(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    host_id: str
    date_time: datetime
    movies: List[MovieSummary]
    is_public: bool
    participants: List[str]
    invited_user_ids: List[str]
    created_at: datetime
    status: WatchPartyStatus = "scheduled"
