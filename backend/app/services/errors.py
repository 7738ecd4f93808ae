"""
Domain errors raised by watch party services.

Routers translate these into HTTP responses with a generic message;
the detail carried here is for logs only.
"""


class WatchPartyError(Exception):
    """Base class for domain errors"""


class NotFoundError(WatchPartyError):
    """Referenced session or bucket does not exist"""


class ForbiddenError(WatchPartyError):
    """Membership or visibility rule violated"""


class ConflictError(WatchPartyError):
    """Duplicate join, duplicate bucket entry or limit reached"""


class ValidationError(WatchPartyError):
    """Malformed or missing caller input"""


class UpstreamError(WatchPartyError):
    """Movie provider or store unavailable"""
