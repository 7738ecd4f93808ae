"""
Async database connection management using asyncpg
"""

import json

import asyncpg
from typing import Optional, AsyncGenerator
from app.config import settings

# Global connection pool
_pool: Optional[asyncpg.Pool] = None


async def _init_connection(conn: asyncpg.Connection):
    """Decode JSON/JSONB columns into Python objects"""
    for type_name in ("json", "jsonb"):
        await conn.set_type_codec(
            type_name,
            encoder=json.dumps,
            decoder=json.loads,
            schema="pg_catalog",
        )


async def init_db() -> asyncpg.Pool:
    """Initialize database connection pool and schema"""
    global _pool

    _pool = await asyncpg.create_pool(
        settings.DATABASE_URL,
        min_size=settings.DATABASE_POOL_MIN_SIZE,
        max_size=settings.DATABASE_POOL_MAX_SIZE,
        command_timeout=settings.DATABASE_COMMAND_TIMEOUT,
        init=_init_connection,
    )

    async with _pool.acquire() as conn:
        await _init_schema(conn)

    return _pool


async def _init_schema(conn: asyncpg.Connection):
    """Create the watch party schema if it does not exist."""
    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS watch_parties (
            id TEXT PRIMARY KEY,
            title VARCHAR(200) NOT NULL,
            description TEXT,
            host_id TEXT NOT NULL,
            date_time TIMESTAMP WITH TIME ZONE NOT NULL,
            movies JSONB NOT NULL DEFAULT '[]'::jsonb,
            is_public BOOLEAN NOT NULL DEFAULT FALSE,
            participants TEXT[] NOT NULL DEFAULT '{}',
            invited_user_ids TEXT[] NOT NULL DEFAULT '{}',
            status VARCHAR(20) NOT NULL DEFAULT 'scheduled',
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        )
    """
    )

    await conn.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_watch_parties_participants
            ON watch_parties USING GIN (participants)
    """
    )

    await conn.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_watch_parties_public
            ON watch_parties(status)
            WHERE is_public = TRUE
    """
    )

    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS watch_party_messages (
            id TEXT PRIMARY KEY,
            watch_party_id TEXT NOT NULL,
            sender_id TEXT NOT NULL,
            messages JSONB NOT NULL,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        )
    """
    )

    await conn.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_watch_party_messages_party
            ON watch_party_messages(watch_party_id, created_at)
    """
    )

    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS notifications (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            type VARCHAR(40) NOT NULL,
            message TEXT NOT NULL,
            watch_party_id TEXT NOT NULL,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        )
    """
    )

    await conn.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_notifications_user_created
            ON notifications(user_id, created_at DESC)
    """
    )

    # Participant key directory, one row per (watch party, user)
    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS watch_party_users (
            watch_party_id TEXT NOT NULL,
            user_id TEXT NOT NULL,
            public_key TEXT NOT NULL,
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            PRIMARY KEY (watch_party_id, user_id)
        )
    """
    )

    # A bucket exists from the first add on, even after it is emptied.
    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS buckets (
            user_id TEXT PRIMARY KEY,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
        )
    """
    )

    await conn.execute(
        """
        CREATE TABLE IF NOT EXISTS bucket_movies (
            user_id TEXT NOT NULL,
            movie_id INTEGER NOT NULL,
            title TEXT NOT NULL,
            runtime INTEGER NOT NULL,
            poster_path TEXT,
            added_at TIMESTAMP WITH TIME ZONE DEFAULT NOW(),
            PRIMARY KEY (user_id, movie_id)
        )
    """
    )


async def close_db():
    """Close database connection pool"""
    global _pool
    if _pool:
        await _pool.close()
        _pool = None


async def get_pool() -> asyncpg.Pool:
    """Get database connection pool"""
    if _pool is None:
        raise RuntimeError("Database not initialized")
    return _pool


async def get_connection() -> AsyncGenerator[asyncpg.Connection, None]:
    """Dependency for getting a database connection"""
    pool = await get_pool()
    async with pool.acquire() as connection:
        yield connection
