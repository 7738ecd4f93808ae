"""
Movie lookup adapter backed by the TMDB HTTP API.

Details and search results are cached; a movie's attributes rarely change
so both use a long TTL.
"""

import logging
from typing import Any, Dict, List

import httpx

from app.cache import CacheKeys, TTLCache
from app.schemas.movie import MovieDetails
from app.services.errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)


class MovieLookupService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: TTLCache,
        *,
        api_key: str,
        movie_ttl: float,
        search_ttl: float,
        default_runtime: int = 120,
    ):
        self._client = client
        self._cache = cache
        self._api_key = api_key
        self._movie_ttl = movie_ttl
        self._search_ttl = search_ttl
        self._default_runtime = default_runtime

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = await self._client.get(path, params={"api_key": self._api_key, **params})
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("tmdb_request_failed path=%s error=%s", path, exc.__class__.__name__)
            raise UpstreamError(f"movie provider request failed: {path}") from exc

    async def get_movie(self, movie_id: int) -> MovieDetails:
        async def load() -> MovieDetails:
            data = await self._get_json(f"/movie/{movie_id}", {})
            if "id" not in data:
                raise UpstreamError(f"movie provider returned no id for {movie_id}")
            return MovieDetails(
                id=data["id"],
                title=data.get("title") or "",
                runtime=data.get("runtime"),
                poster_path=data.get("poster_path"),
                overview=data.get("overview"),
                release_date=data.get("release_date"),
            )

        return await self._cache.read_through(CacheKeys.movie(movie_id), self._movie_ttl, load)

    async def search_movies(self, query: str) -> List[MovieDetails]:
        query = (query or "").strip()
        if not query:
            raise ValidationError("search query must not be empty")

        async def load() -> List[MovieDetails]:
            data = await self._get_json(
                "/search/movie",
                {"query": query, "page": 1, "include_adult": "false"},
            )
            logger.debug("tmdb_search query_length=%s results=%s", len(query), len(data.get("results") or []))
            return [
                MovieDetails(
                    id=movie["id"],
                    title=movie.get("title") or "",
                    release_date=movie.get("release_date"),
                    poster_path=movie.get("poster_path"),
                    overview=movie.get("overview"),
                    runtime=movie.get("runtime") or self._default_runtime,
                )
                for movie in data.get("results") or []
            ]

        return await self._cache.read_through(CacheKeys.movie_search(query), self._search_ttl, load)
