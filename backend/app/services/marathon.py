"""
Marathon bucket - a per-user list of movies and its total runtime.
"""

import logging
from dataclasses import dataclass

from app.cache import CacheKeys, Mutation, TTLCache, invalidation_keys
from app.repositories.buckets import BucketRepository
from app.schemas.marathon import Bucket, BucketRuntime
from app.services.errors import ConflictError, NotFoundError, ValidationError
from app.services.movies import MovieLookupService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BucketCacheTTLs:
    bucket: float = 600
    runtime: float = 600


def format_runtime(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


class MarathonService:
    def __init__(
        self,
        repository: BucketRepository,
        movies: MovieLookupService,
        cache: TTLCache,
        *,
        max_movies: int = 30,
        ttls: BucketCacheTTLs = BucketCacheTTLs(),
    ):
        self._repository = repository
        self._movies = movies
        self._cache = cache
        self._max_movies = max_movies
        self._ttls = ttls

    async def add_movie(self, user_id: str, movie_id: int) -> Bucket:
        movie = await self._movies.get_movie(movie_id)
        if not movie.runtime:
            raise ValidationError(f"movie {movie_id} has no runtime")

        movies = await self._repository.list_movies(user_id)
        if len(movies) >= self._max_movies:
            raise ConflictError(f"bucket limit reached ({self._max_movies} movies)")
        if any(existing.id == movie.id for existing in movies):
            raise ConflictError(f"movie {movie_id} already in bucket")

        added = await self._repository.add(user_id, movie)
        if added is None:
            raise ConflictError(f"movie {movie_id} already in bucket")

        self._cache.invalidate(invalidation_keys(Mutation.BUCKET_CHANGED, user_id=user_id))
        logger.info("bucket_movie_added user_id=%s movie_id=%s", user_id, movie.id)
        return Bucket(user_id=user_id, movies=[*movies, added])

    async def remove_movie(self, user_id: str, movie_id: int) -> Bucket:
        if not await self._repository.exists(user_id):
            raise NotFoundError(f"bucket for user {user_id} not found")

        movies = await self._repository.list_movies(user_id)
        await self._repository.remove(user_id, movie_id)
        self._cache.invalidate(invalidation_keys(Mutation.BUCKET_CHANGED, user_id=user_id))
        logger.info("bucket_movie_removed user_id=%s movie_id=%s", user_id, movie_id)
        return Bucket(user_id=user_id, movies=[movie for movie in movies if movie.id != movie_id])

    async def get_bucket(self, user_id: str) -> Bucket:
        async def load() -> Bucket:
            return Bucket(user_id=user_id, movies=await self._repository.list_movies(user_id))

        return await self._cache.read_through(CacheKeys.bucket(user_id), self._ttls.bucket, load)

    async def calculate_total_runtime(self, user_id: str) -> BucketRuntime:
        async def load() -> BucketRuntime:
            bucket = await self.get_bucket(user_id)
            total_minutes = sum(movie.runtime for movie in bucket.movies)
            return BucketRuntime(
                total_minutes=total_minutes,
                formatted=format_runtime(total_minutes),
                movie_count=len(bucket.movies),
            )

        return await self._cache.read_through(CacheKeys.bucket_runtime(user_id), self._ttls.runtime, load)
