# Watch Party Cache Layer
from app.cache.invalidation import Mutation, invalidation_keys
from app.cache.keys import CacheKeys
from app.cache.store import MISS, TTLCache

__all__ = ["CacheKeys", "MISS", "Mutation", "TTLCache", "invalidation_keys"]
