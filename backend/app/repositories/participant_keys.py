"""
Participant key repository - one public key per (watch party, user).
"""

from typing import List

from app.schemas.participant_key import ParticipantKey, ParticipantKeyId


class ParticipantKeyRepository:
    def __init__(self, pool):
        self._pool = pool

    async def upsert(self, key: ParticipantKeyId, public_key: str) -> None:
        async with self._pool.acquire() as conn:
            await conn.execute(
                """
                INSERT INTO watch_party_users (watch_party_id, user_id, public_key)
                VALUES ($1, $2, $3)
                ON CONFLICT (watch_party_id, user_id)
                DO UPDATE SET public_key = EXCLUDED.public_key, updated_at = NOW()
                """,
                key.watch_party_id,
                key.user_id,
                public_key,
            )

    async def list_for_party(self, watch_party_id: str) -> List[ParticipantKey]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """
                SELECT user_id, public_key
                FROM watch_party_users
                WHERE watch_party_id = $1
                """,
                watch_party_id,
            )
        return [ParticipantKey(user_id=row["user_id"], public_key=row["public_key"]) for row in rows]
