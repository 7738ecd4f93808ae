"""
Participant public key schemas.
"""

from typing import NamedTuple

from pydantic import Field

from app.schemas.common import CamelModel
from app.security_limits import MAX_PUBLIC_KEY_B64_CHARS


class ParticipantKeyId(NamedTuple):
    """Composite key of the key directory: one public key per (session, user)"""
    watch_party_id: str
    user_id: str


class PublicKeyRequest(CamelModel):
    public_key: str = Field(..., min_length=1, max_length=MAX_PUBLIC_KEY_B64_CHARS)


class ParticipantKey(CamelModel):
    user_id: str
    public_key: str
