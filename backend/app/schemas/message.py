"""
Message schemas - server only sees encrypted blobs
"""

from pydantic import Field
from datetime import datetime
from typing import List, Optional

from app.schemas.common import CamelModel
from app.security_limits import (
    MAX_ENVELOPES_PER_BATCH,
    MAX_MESSAGE_CIPHERTEXT_B64_CHARS,
    MAX_PUBLIC_KEY_B64_CHARS,
    MAX_WRAPPED_KEY_B64_CHARS,
)


class EnvelopeCreate(CamelModel):
    """One recipient-addressed encrypted unit (opaque to the server)"""
    encrypted_message: Optional[str] = Field(default=None, max_length=MAX_MESSAGE_CIPHERTEXT_B64_CHARS)
    encrypted_symmetric_key: Optional[str] = Field(default=None, max_length=MAX_WRAPPED_KEY_B64_CHARS)
    nonce: Optional[str] = Field(default=None, max_length=MAX_WRAPPED_KEY_B64_CHARS)
    recipient_public_key: Optional[str] = Field(default=None, max_length=MAX_PUBLIC_KEY_B64_CHARS)


class MessageEnvelope(EnvelopeCreate):
    """Stored envelope (still encrypted) with its server timestamp"""
    timestamp: datetime


class MessageSendRequest(CamelModel):
    messages: List[EnvelopeCreate] = Field(..., max_length=MAX_ENVELOPES_PER_BATCH)


class MessageBatch(CamelModel):
    id: str
    watch_party_id: str
    sender_id: str
    messages: List[MessageEnvelope]
