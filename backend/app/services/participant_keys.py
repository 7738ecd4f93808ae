"""
Participant key directory - public keys clients use to address envelopes.
"""

import logging
from typing import List

from app.repositories.participant_keys import ParticipantKeyRepository
from app.schemas.participant_key import ParticipantKey, ParticipantKeyId
from app.services.errors import ValidationError

logger = logging.getLogger(__name__)


class ParticipantKeyService:
    def __init__(self, repository: ParticipantKeyRepository):
        self._repository = repository

    async def set_public_key(self, watch_party_id: str, user_id: str, public_key: str) -> None:
        if not public_key:
            raise ValidationError("public key is required")
        await self._repository.upsert(ParticipantKeyId(watch_party_id, user_id), public_key)
        logger.info("participant_key_set watch_party_id=%s user_id=%s", watch_party_id, user_id)

    async def list_participants_with_keys(self, watch_party_id: str) -> List[ParticipantKey]:
        keys = await self._repository.list_for_party(watch_party_id)
        logger.debug("participant_keys_listed watch_party_id=%s count=%s", watch_party_id, len(keys))
        return keys
