# Watch Party Business Logic Services
from app.services.marathon import MarathonService
from app.services.messages import MessageRelayService
from app.services.movies import MovieLookupService
from app.services.notifications import NotificationService
from app.services.participant_keys import ParticipantKeyService
from app.services.watch_parties import WatchPartyService

__all__ = [
    "MarathonService",
    "MessageRelayService",
    "MovieLookupService",
    "NotificationService",
    "ParticipantKeyService",
    "WatchPartyService",
]
