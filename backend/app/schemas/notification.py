"""
Notification schemas.
"""

from datetime import datetime
from typing import Literal

from app.schemas.common import CamelModel


NotificationType = Literal["watchPartyInvite", "watchPartyJoin"]


class NotificationDraft(CamelModel):
    """Notification content before it is appended to a user's log"""
    type: NotificationType
    message: str
    watch_party_id: str


class Notification(CamelModel):
    id: str
    user_id: str
    type: NotificationType
    message: str
    watch_party_id: str
    created_at: datetime
