"""
Watch party repository - session records in the watch_parties table.
"""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import uuid4

from app.schemas.movie import MovieSummary
from app.schemas.watch_party import WatchParty

_COLUMNS = """
    id, title, description, host_id, date_time, movies, is_public,
    participants, invited_user_ids, status, created_at
"""


def row_to_watch_party(row) -> WatchParty:
    return WatchParty(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        host_id=row["host_id"],
        date_time=row["date_time"],
        movies=[MovieSummary.model_validate(movie) for movie in (row["movies"] or [])],
        is_public=row["is_public"],
        participants=list(row["participants"] or []),
        invited_user_ids=list(row["invited_user_ids"] or []),
        status=row["status"],
        created_at=row["created_at"],
    )


class WatchPartyRepository:
    def __init__(self, pool):
        self._pool = pool

    async def create(
        self,
        *,
        title: str,
        description: Optional[str],
        host_id: str,
        date_time: datetime,
        movies: Sequence[MovieSummary],
        is_public: bool,
        participants: Sequence[str],
        invited_user_ids: Sequence[str],
        status: str = "scheduled",
    ) -> WatchParty:
        party_id = str(uuid4())
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                f"""
                INSERT INTO watch_parties (
                    id, title, description, host_id, date_time, movies,
                    is_public, participants, invited_user_ids, status
                )
                VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
                RETURNING {_COLUMNS}
                """,
                party_id,
                title,
                description,
                host_id,
                date_time,
                [movie.model_dump(mode="json") for movie in movies],
                is_public,
                list(participants),
                list(invited_user_ids),
                status,
            )
        return row_to_watch_party(row)

    async def get(self, party_id: str) -> Optional[WatchParty]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {_COLUMNS} FROM watch_parties WHERE id = $1",
                party_id,
            )
        return row_to_watch_party(row) if row else None

    async def add_participant(self, party_id: str, user_id: str) -> Optional[WatchParty]:
        """
        Move user_id from the invited set into the participant set

        Both arrays change in one UPDATE with set semantics, so concurrent
        joins by different users commute instead of overwriting each other.
        """
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                f"""
                UPDATE watch_parties
                SET participants = CASE
                        WHEN $2 = ANY(participants) THEN participants
                        ELSE array_append(participants, $2)
                    END,
                    invited_user_ids = array_remove(invited_user_ids, $2)
                WHERE id = $1
                RETURNING {_COLUMNS}
                """,
                party_id,
                user_id,
            )
        return row_to_watch_party(row) if row else None

    async def list_for_participant(self, user_id: str) -> List[WatchParty]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                f"SELECT {_COLUMNS} FROM watch_parties WHERE $1 = ANY(participants)",
                user_id,
            )
        return [row_to_watch_party(row) for row in rows]

    async def list_public(self) -> List[WatchParty]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {_COLUMNS}
                FROM watch_parties
                WHERE is_public = TRUE AND status = 'scheduled'
                """
            )
        return [row_to_watch_party(row) for row in rows]
