"""
Message relay - stores and returns encrypted envelope batches.
The server never decrypts anything.
"""

import logging
from datetime import datetime, timezone
from typing import List, Sequence

from app.repositories.messages import MessageBatchRepository
from app.schemas.message import EnvelopeCreate, MessageBatch, MessageEnvelope
from app.services.errors import ValidationError

logger = logging.getLogger(__name__)


class MessageRelayService:
    def __init__(self, repository: MessageBatchRepository):
        self._repository = repository

    async def send_message(
        self,
        watch_party_id: str,
        sender_id: str,
        envelopes: Sequence[EnvelopeCreate],
    ) -> MessageBatch:
        if not envelopes:
            raise ValidationError("at least one message envelope is required")

        timestamp = datetime.now(timezone.utc)
        stamped = [
            MessageEnvelope(**envelope.model_dump(), timestamp=timestamp)
            for envelope in envelopes
        ]
        batch = await self._repository.create(watch_party_id, sender_id, stamped)
        logger.info(
            "message_batch_stored watch_party_id=%s sender_id=%s envelopes=%s",
            watch_party_id,
            sender_id,
            len(stamped),
        )
        return batch

    async def get_messages(self, watch_party_id: str) -> List[MessageBatch]:
        return await self._repository.list_for_party(watch_party_id)
