"""
Notification repository - per-user append-only notification log.
"""

from typing import List
from uuid import uuid4

from app.schemas.notification import Notification, NotificationDraft


def row_to_notification(row) -> Notification:
    return Notification(
        id=row["id"],
        user_id=row["user_id"],
        type=row["type"],
        message=row["message"],
        watch_party_id=row["watch_party_id"],
        created_at=row["created_at"],
    )


class NotificationRepository:
    def __init__(self, pool):
        self._pool = pool

    async def create(self, user_id: str, draft: NotificationDraft) -> Notification:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO notifications (id, user_id, type, message, watch_party_id)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING id, user_id, type, message, watch_party_id, created_at
                """,
                str(uuid4()),
                user_id,
                draft.type,
                draft.message,
                draft.watch_party_id,
            )
        return row_to_notification(row)

    async def list_for_user(self, user_id: str) -> List[Notification]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """
                SELECT id, user_id, type, message, watch_party_id, created_at
                FROM notifications
                WHERE user_id = $1
                ORDER BY created_at DESC
                """,
                user_id,
            )
        return [row_to_notification(row) for row in rows]
