"""
Wires repositories, the shared cache and services for one process.
"""

from dataclasses import dataclass

import httpx

from app.cache import TTLCache
from app.config import Settings
from app.repositories import (
    BucketRepository,
    MessageBatchRepository,
    NotificationRepository,
    ParticipantKeyRepository,
    WatchPartyRepository,
)
from app.services.marathon import BucketCacheTTLs, MarathonService
from app.services.messages import MessageRelayService
from app.services.movies import MovieLookupService
from app.services.notifications import NotificationService
from app.services.participant_keys import ParticipantKeyService
from app.services.watch_parties import SessionCacheTTLs, WatchPartyService


@dataclass
class ServiceContainer:
    cache: TTLCache
    movies: MovieLookupService
    notifications: NotificationService
    watch_parties: WatchPartyService
    messages: MessageRelayService
    participant_keys: ParticipantKeyService
    marathon: MarathonService


def build_tmdb_client(active_settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=active_settings.TMDB_BASE_URL,
        timeout=active_settings.TMDB_TIMEOUT_SECONDS,
    )


def build_services(pool, http_client: httpx.AsyncClient, active_settings: Settings) -> ServiceContainer:
    """Create the process-wide cache and every service sharing it"""
    cache = TTLCache(max_entries=active_settings.CACHE_MAX_ENTRIES)

    movies = MovieLookupService(
        http_client,
        cache,
        api_key=active_settings.TMDB_API_KEY,
        movie_ttl=active_settings.CACHE_MOVIE_TTL,
        search_ttl=active_settings.CACHE_SEARCH_TTL,
        default_runtime=active_settings.DEFAULT_MOVIE_RUNTIME,
    )
    notifications = NotificationService(NotificationRepository(pool))

    watch_parties = WatchPartyService(
        WatchPartyRepository(pool),
        movies,
        notifications,
        cache,
        SessionCacheTTLs(
            session=active_settings.CACHE_SESSION_TTL,
            user_sessions=active_settings.CACHE_USER_SESSIONS_TTL,
            public_sessions=active_settings.CACHE_PUBLIC_SESSIONS_TTL,
        ),
    )

    marathon = MarathonService(
        BucketRepository(pool),
        movies,
        cache,
        max_movies=active_settings.BUCKET_MAX_MOVIES,
        ttls=BucketCacheTTLs(
            bucket=active_settings.CACHE_BUCKET_TTL,
            runtime=active_settings.CACHE_BUCKET_TTL,
        ),
    )

    return ServiceContainer(
        cache=cache,
        movies=movies,
        notifications=notifications,
        watch_parties=watch_parties,
        messages=MessageRelayService(MessageBatchRepository(pool)),
        participant_keys=ParticipantKeyService(ParticipantKeyRepository(pool)),
        marathon=marathon,
    )
