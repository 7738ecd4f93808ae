"""Declarative cache invalidation rules.

Each mutation names the cache keys whose underlying query it can change.
Services ask this table for the keys to drop after a successful write
instead of listing them at every call site.

Example:
    keys = invalidation_keys(
        Mutation.SESSION_JOINED,
        session_id=party.id,
        user_id="bob",
        host_id=party.host_id,
        participants=party.participants,
        is_public=party.is_public,
    )
    cache.invalidate(keys)
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Tuple, Union

from app.cache.keys import CacheKeys


class Mutation(str, Enum):
    SESSION_CREATED = "session_created"
    SESSION_JOINED = "session_joined"
    BUCKET_CHANGED = "bucket_changed"


# A rule yields a key, a list of keys, or None when it does not apply.
Rule = Callable[[Dict[str, Any]], Union[None, str, List[str]]]


def _public_if_public(ctx: Dict[str, Any]):
    return CacheKeys.public_sessions() if ctx.get("is_public") else None


def _participant_listings(ctx: Dict[str, Any]) -> List[str]:
    # Every member's listing embeds the participants array.
    return [CacheKeys.user_sessions(uid) for uid in ctx.get("participants", ())]


INVALIDATION_RULES: Dict[Mutation, Tuple[Rule, ...]] = {
    Mutation.SESSION_CREATED: (
        lambda ctx: CacheKeys.user_sessions(ctx["host_id"]),
        _public_if_public,
    ),
    Mutation.SESSION_JOINED: (
        lambda ctx: CacheKeys.session(ctx["session_id"]),
        lambda ctx: CacheKeys.user_sessions(ctx["user_id"]),
        lambda ctx: CacheKeys.user_sessions(ctx["host_id"]),
        _participant_listings,
        _public_if_public,
    ),
    Mutation.BUCKET_CHANGED: (
        lambda ctx: CacheKeys.bucket(ctx["user_id"]),
        lambda ctx: CacheKeys.bucket_runtime(ctx["user_id"]),
    ),
}


def invalidation_keys(mutation: Mutation, **context: Any) -> List[str]:
    """Return the distinct cache keys affected by mutation, in rule order."""
    keys: List[str] = []
    for rule in INVALIDATION_RULES[mutation]:
        produced = rule(context)
        if produced is None:
            continue
        for key in [produced] if isinstance(produced, str) else produced:
            if key not in keys:
                keys.append(key)
    return keys
