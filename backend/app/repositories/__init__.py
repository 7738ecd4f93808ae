# Watch Party Repositories
from app.repositories.buckets import BucketRepository
from app.repositories.messages import MessageBatchRepository
from app.repositories.notifications import NotificationRepository
from app.repositories.participant_keys import ParticipantKeyRepository
from app.repositories.watch_parties import WatchPartyRepository

__all__ = [
    "BucketRepository",
    "MessageBatchRepository",
    "NotificationRepository",
    "ParticipantKeyRepository",
    "WatchPartyRepository",
]
