"""
Message batch repository - append-only encrypted envelope batches.
"""

from typing import List, Sequence
from uuid import uuid4

from app.schemas.message import MessageBatch, MessageEnvelope


def row_to_batch(row) -> MessageBatch:
    return MessageBatch(
        id=row["id"],
        watch_party_id=row["watch_party_id"],
        sender_id=row["sender_id"],
        messages=[MessageEnvelope.model_validate(envelope) for envelope in row["messages"]],
    )


class MessageBatchRepository:
    def __init__(self, pool):
        self._pool = pool

    async def create(
        self,
        watch_party_id: str,
        sender_id: str,
        envelopes: Sequence[MessageEnvelope],
    ) -> MessageBatch:
        batch_id = str(uuid4())
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO watch_party_messages (id, watch_party_id, sender_id, messages)
                VALUES ($1, $2, $3, $4)
                RETURNING id, watch_party_id, sender_id, messages
                """,
                batch_id,
                watch_party_id,
                sender_id,
                [envelope.model_dump(mode="json") for envelope in envelopes],
            )
        return row_to_batch(row)

    async def list_for_party(self, watch_party_id: str) -> List[MessageBatch]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """
                SELECT id, watch_party_id, sender_id, messages
                FROM watch_party_messages
                WHERE watch_party_id = $1
                ORDER BY created_at ASC
                """,
                watch_party_id,
            )
        return [row_to_batch(row) for row in rows]
