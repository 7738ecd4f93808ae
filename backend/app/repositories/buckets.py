"""
Marathon bucket repository - movies a user has queued for a marathon.
"""

from typing import List, Optional

from app.schemas.marathon import BucketMovie
from app.schemas.movie import MovieDetails


def row_to_bucket_movie(row) -> BucketMovie:
    return BucketMovie(
        id=row["movie_id"],
        title=row["title"],
        runtime=row["runtime"],
        poster_path=row["poster_path"],
        added_at=row["added_at"],
    )


class BucketRepository:
    def __init__(self, pool):
        self._pool = pool

    async def list_movies(self, user_id: str) -> List[BucketMovie]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """
                SELECT movie_id, title, runtime, poster_path, added_at
                FROM bucket_movies
                WHERE user_id = $1
                ORDER BY added_at ASC
                """,
                user_id,
            )
        return [row_to_bucket_movie(row) for row in rows]

    async def add(self, user_id: str, movie: MovieDetails) -> Optional[BucketMovie]:
        """Insert movie; returns None when it is already in the bucket"""
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                await conn.execute(
                    "INSERT INTO buckets (user_id) VALUES ($1) ON CONFLICT (user_id) DO NOTHING",
                    user_id,
                )
                row = await conn.fetchrow(
                    """
                    INSERT INTO bucket_movies (user_id, movie_id, title, runtime, poster_path)
                    VALUES ($1, $2, $3, $4, $5)
                    ON CONFLICT (user_id, movie_id) DO NOTHING
                    RETURNING movie_id, title, runtime, poster_path, added_at
                    """,
                    user_id,
                    movie.id,
                    movie.title,
                    movie.runtime,
                    movie.poster_path,
                )
        return row_to_bucket_movie(row) if row else None

    async def exists(self, user_id: str) -> bool:
        async with self._pool.acquire() as conn:
            found = await conn.fetchval("SELECT 1 FROM buckets WHERE user_id = $1", user_id)
        return found is not None

    async def remove(self, user_id: str, movie_id: int) -> None:
        async with self._pool.acquire() as conn:
            await conn.execute(
                "DELETE FROM bucket_movies WHERE user_id = $1 AND movie_id = $2",
                user_id,
                movie_id,
            )
