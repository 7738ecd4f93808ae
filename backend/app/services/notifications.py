"""
Notification dispatcher - appends invite/join alerts to a user's log.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from app.repositories.notifications import NotificationRepository
from app.schemas.notification import Notification, NotificationDraft

logger = logging.getLogger(__name__)


@dataclass
class DispatchOutcome:
    """Result of one best-effort delivery"""
    user_id: str
    notification: Optional[Notification] = None
    error: Optional[BaseException] = None

    @property
    def delivered(self) -> bool:
        return self.error is None


class NotificationService:
    def __init__(self, repository: NotificationRepository):
        self._repository = repository

    async def notify(self, user_id: str, draft: NotificationDraft) -> Notification:
        notification = await self._repository.create(user_id, draft)
        logger.info(
            "notification_created user_id=%s type=%s watch_party_id=%s",
            user_id,
            draft.type,
            draft.watch_party_id,
        )
        return notification

    async def dispatch_all(self, deliveries: Sequence[Tuple[str, NotificationDraft]]) -> List[DispatchOutcome]:
        """
        Attempt every delivery concurrently and report each outcome

        Individual failures are logged and returned, never raised.
        """
        results = await asyncio.gather(
            *(self.notify(user_id, draft) for user_id, draft in deliveries),
            return_exceptions=True,
        )

        outcomes = []
        for (user_id, draft), result in zip(deliveries, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "notification_failed user_id=%s type=%s watch_party_id=%s error=%s",
                    user_id,
                    draft.type,
                    draft.watch_party_id,
                    result.__class__.__name__,
                )
                outcomes.append(DispatchOutcome(user_id=user_id, error=result))
            else:
                outcomes.append(DispatchOutcome(user_id=user_id, notification=result))
        return outcomes

    async def get_notifications(self, user_id: str) -> List[Notification]:
        return await self._repository.list_for_user(user_id)
