# Watch Party Pydantic Schemas
from app.schemas.marathon import Bucket, BucketAddRequest, BucketMovie, BucketRuntime
from app.schemas.message import EnvelopeCreate, MessageBatch, MessageEnvelope, MessageSendRequest
from app.schemas.movie import MovieDetails, MovieSummary
from app.schemas.notification import Notification, NotificationDraft
from app.schemas.participant_key import ParticipantKey, ParticipantKeyId, PublicKeyRequest
from app.schemas.watch_party import WatchParty, WatchPartyCreateRequest

__all__ = [
    "Bucket", "BucketAddRequest", "BucketMovie", "BucketRuntime",
    "EnvelopeCreate", "MessageBatch", "MessageEnvelope", "MessageSendRequest",
    "MovieDetails", "MovieSummary",
    "Notification", "NotificationDraft",
    "ParticipantKey", "ParticipantKeyId", "PublicKeyRequest",
    "WatchParty", "WatchPartyCreateRequest",
]
