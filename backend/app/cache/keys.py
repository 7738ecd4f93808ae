"""Cache key schema.

Key format: {prefix}:{entity}:{identifier}

Where:
- prefix: "watchparty"
- entity: "session", "user_sessions", "public_sessions", "movie",
  "movie_search", "bucket", "bucket_runtime"
- identifier: session id, user id, movie id or normalized query text
"""

import re


class CacheKeys:
    """Cache key generator following one naming convention."""

    PREFIX = "watchparty"

    @classmethod
    def session(cls, session_id: str) -> str:
        """Key for a single watch party record."""
        return f"{cls.PREFIX}:session:{session_id}"

    @classmethod
    def user_sessions(cls, user_id: str) -> str:
        """Key for the sessions a user participates in."""
        return f"{cls.PREFIX}:user_sessions:{user_id}"

    @classmethod
    def public_sessions(cls) -> str:
        """Key for the aggregate list of public scheduled sessions."""
        return f"{cls.PREFIX}:public_sessions:all"

    @classmethod
    def movie(cls, movie_id: int) -> str:
        return f"{cls.PREFIX}:movie:{movie_id}"

    @classmethod
    def movie_search(cls, query: str) -> str:
        """Key for a search; the query is lower-cased and whitespace runs become underscores."""
        return f"{cls.PREFIX}:movie_search:{normalize_query(query)}"

    @classmethod
    def bucket(cls, user_id: str) -> str:
        return f"{cls.PREFIX}:bucket:{user_id}"

    @classmethod
    def bucket_runtime(cls, user_id: str) -> str:
        return f"{cls.PREFIX}:bucket_runtime:{user_id}"


def normalize_query(query: str) -> str:
    return re.sub(r"\s+", "_", query.strip().lower())
