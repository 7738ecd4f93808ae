"""
Watch party lifecycle: creation, membership and retrieval of sessions.

Reads go through the shared TTL cache. Writes hit the store first, then drop
every cache key listed for the mutation in app.cache.invalidation, then
notify the affected users on a best-effort basis.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import timezone
from typing import List

from app.cache import CacheKeys, Mutation, TTLCache, invalidation_keys
from app.repositories.watch_parties import WatchPartyRepository
from app.schemas.notification import NotificationDraft
from app.schemas.watch_party import WatchParty, WatchPartyCreateRequest
from app.services.errors import ConflictError, ForbiddenError, NotFoundError
from app.services.movies import MovieLookupService
from app.services.notifications import NotificationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionCacheTTLs:
    """Seconds each cached read stays fresh"""
    session: float = 600
    user_sessions: float = 300
    public_sessions: float = 300


def _unique(values, exclude=()) -> List[str]:
    seen = set(exclude)
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class WatchPartyService:
    def __init__(
        self,
        repository: WatchPartyRepository,
        movies: MovieLookupService,
        notifications: NotificationService,
        cache: TTLCache,
        ttls: SessionCacheTTLs = SessionCacheTTLs(),
    ):
        self._repository = repository
        self._movies = movies
        self._notifications = notifications
        self._cache = cache
        self._ttls = ttls

    async def create_session(self, creator_id: str, command: WatchPartyCreateRequest) -> WatchParty:
        # Any failed lookup aborts before anything is written.
        details = await asyncio.gather(*(self._movies.get_movie(movie_id) for movie_id in command.movie_ids))

        date_time = command.date_time
        if date_time.tzinfo is None:
            date_time = date_time.replace(tzinfo=timezone.utc)

        party = await self._repository.create(
            title=command.title,
            description=command.description,
            host_id=creator_id,
            date_time=date_time,
            movies=[movie.to_summary() for movie in details],
            is_public=command.is_public,
            participants=[creator_id],
            invited_user_ids=_unique(command.invited_user_ids, exclude=(creator_id,)),
        )

        self._cache.invalidate(
            invalidation_keys(Mutation.SESSION_CREATED, host_id=creator_id, is_public=party.is_public)
        )
        logger.info(
            "watch_party_created watch_party_id=%s host_id=%s public=%s movies=%s invited=%s",
            party.id,
            creator_id,
            party.is_public,
            len(party.movies),
            len(party.invited_user_ids),
        )

        if party.invited_user_ids:
            draft = NotificationDraft(
                type="watchPartyInvite",
                message=f'You\'ve been invited to "{party.title}" by {creator_id}',
                watch_party_id=party.id,
            )
            await self._notifications.dispatch_all([(user_id, draft) for user_id in party.invited_user_ids])

        return party

    async def join_session(self, user_id: str, session_id: str) -> WatchParty:
        existing = await self._repository.get(session_id)
        if existing is None:
            raise NotFoundError(f"watch party {session_id} not found")

        if not existing.is_public and user_id not in existing.invited_user_ids:
            raise ForbiddenError(f"user {user_id} is not invited to watch party {session_id}")

        if user_id in existing.participants:
            raise ConflictError(f"user {user_id} already participates in watch party {session_id}")

        party = await self._repository.add_participant(session_id, user_id)
        if party is None:
            raise NotFoundError(f"watch party {session_id} not found")

        self._cache.invalidate(
            invalidation_keys(
                Mutation.SESSION_JOINED,
                session_id=session_id,
                user_id=user_id,
                host_id=party.host_id,
                participants=party.participants,
                is_public=party.is_public,
            )
        )
        logger.info("watch_party_joined watch_party_id=%s user_id=%s", session_id, user_id)

        await self._notifications.dispatch_all(
            [
                (
                    party.host_id,
                    NotificationDraft(
                        type="watchPartyJoin",
                        message=f'{user_id} joined your watch party "{party.title}"',
                        watch_party_id=session_id,
                    ),
                )
            ]
        )

        return party

    async def get_session(self, session_id: str) -> WatchParty:
        async def load() -> WatchParty:
            party = await self._repository.get(session_id)
            if party is None:
                raise NotFoundError(f"watch party {session_id} not found")
            return party

        return await self._cache.read_through(CacheKeys.session(session_id), self._ttls.session, load)

    async def get_sessions_for_user(self, user_id: str) -> List[WatchParty]:
        return await self._cache.read_through(
            CacheKeys.user_sessions(user_id),
            self._ttls.user_sessions,
            lambda: self._repository.list_for_participant(user_id),
        )

    async def get_public_sessions(self) -> List[WatchParty]:
        return await self._cache.read_through(
            CacheKeys.public_sessions(),
            self._ttls.public_sessions,
            self._repository.list_public,
        )
