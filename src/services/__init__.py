"""
Storage services backing passion profiles.
"""

from services.profile_store import (
    FileStore,
    InMemoryStore,
    KeyValueStore,
    RedisStore,
    create_store,
)

__all__ = [
    "KeyValueStore",
    "InMemoryStore",
    "FileStore",
    "RedisStore",
    "create_store",
]
