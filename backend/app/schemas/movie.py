"""
Movie schemas - normalized attributes from the movie metadata provider
"""

from typing import Optional

from app.schemas.common import CamelModel


class MovieSummary(CamelModel):
    """Snapshot embedded in a watch party at creation time"""
    id: int
    title: str
    runtime: Optional[int] = None
    poster_path: Optional[str] = None


class MovieDetails(CamelModel):
    id: int
    title: str
    runtime: Optional[int] = None
    poster_path: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None

    def to_summary(self) -> MovieSummary:
        return MovieSummary(
            id=self.id,
            title=self.title,
            runtime=self.runtime,
            poster_path=self.poster_path,
        )
