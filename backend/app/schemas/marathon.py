"""
Marathon bucket schemas - a user's list of movies to binge
"""

from datetime import datetime
from typing import List, Optional

from app.schemas.common import CamelModel


class BucketAddRequest(CamelModel):
    movie_id: int


class BucketMovie(CamelModel):
    id: int
    title: str
    runtime: int
    poster_path: Optional[str] = None
    added_at: datetime


class Bucket(CamelModel):
    user_id: str
    movies: List[BucketMovie]


class BucketRuntime(CamelModel):
    total_minutes: int
    formatted: str
    movie_count: int
