"""
Key-value stores for passion selections.

PassionProfile only needs ``get(key) -> str | None`` and
``set(key, value)`` over strings. Three backends implement that:

1. InMemoryStore: development/testing (default)
2. FileStore: one JSON file per key in a directory
3. RedisStore: shared storage across processes

Every backend reports failures as ``core.exceptions.StorageError`` so
callers handle one exception type regardless of backend.
"""

import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union
from urllib.parse import quote

import redis

from core.exceptions import StorageError
from core.logging import LoggerMixin


class KeyValueStore(Protocol):
    """Minimal durable string storage used by PassionProfile."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


# =============================================================================
# In-Memory Backend (Default)
# =============================================================================

class InMemoryStore:
    """
    Dict-backed store for development and tests.

    Note: values are lost when the process exits.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def get_stats(self) -> Dict[str, Any]:
        return {"backend": "memory", "keys": len(self._data)}


# =============================================================================
# File Backend
# =============================================================================

class FileStore(LoggerMixin):
    """
    Stores each key as ``<directory>/<key>.json``.

    Keys are percent-encoded into filesystem-safe names. Writes land in a
    temp file first and are moved into place with ``os.replace`` so
    readers never see a half-written value.
    """

    def __init__(self, directory: Union[str, Path]):
        self._dir = Path(directory)

    def _path(self, key: str) -> Path:
        # percent-encoding is reversible, so distinct keys never share a file
        return self._dir / f"{quote(key, safe='')}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, UnicodeEncodeError) as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        self.logger.debug("Wrote key", key=key, path=str(path))

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {key}: {e}") from e

    def get_stats(self) -> Dict[str, Any]:
        count = len(list(self._dir.glob("*.json"))) if self._dir.exists() else 0
        return {"backend": "file", "directory": str(self._dir), "keys": count}


# =============================================================================
# Redis Backend
# =============================================================================

class RedisStore(LoggerMixin):
    """
    Redis-backed store for sharing selections across processes.

    Args:
        redis_url: Connection URL, used when ``client`` is not given.
        client: Pre-built ``redis.Redis`` (tests pass a mock here).
        key_prefix: Prepended to every key.
        ttl_seconds: Expiry applied on every write; 0 means no expiry.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        client: Optional[Any] = None,
        key_prefix: str = "",
        ttl_seconds: int = 0,
    ):
        self._prefix = key_prefix
        self._ttl = ttl_seconds
        self._redis = client if client is not None else redis.from_url(
            redis_url, decode_responses=True
        )
        if client is None:
            self.logger.info("Using Redis store", url=redis_url.split("@")[-1])

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            value = self._redis.get(self._key(key))
        except (redis.RedisError, UnicodeDecodeError) as e:
            raise StorageError(f"Redis read failed for {key}: {e}") from e
        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError as e:
                raise StorageError(f"Redis value for {key} is not UTF-8: {e}") from e
        return value

    def set(self, key: str, value: str) -> None:
        try:
            if self._ttl:
                self._redis.setex(self._key(key), self._ttl, value)
            else:
                self._redis.set(self._key(key), value)
        except redis.RedisError as e:
            raise StorageError(f"Redis write failed for {key}: {e}") from e

    def delete(self, key: str) -> None:
        try:
            self._redis.delete(self._key(key))
        except redis.RedisError as e:
            raise StorageError(f"Redis delete failed for {key}: {e}") from e

    def get_stats(self) -> Dict[str, Any]:
        return {"backend": "redis", "key_prefix": self._prefix, "ttl_seconds": self._ttl}


# =============================================================================
# Factory
# =============================================================================

def create_store(settings: Optional[Any] = None) -> KeyValueStore:
    """
    Build the store configured in settings.

    Args:
        settings: ``config.Settings``; defaults to ``get_settings()``.

    Raises:
        ValueError: If ``profile_store_backend`` names no known backend.
    """
    if settings is None:
        from config.settings import get_settings
        settings = get_settings()

    backend = settings.profile_store_backend
    if backend == "memory":
        return InMemoryStore()
    if backend == "file":
        return FileStore(settings.profile_store_dir)
    if backend == "redis":
        return RedisStore(
            redis_url=settings.redis_url,
            key_prefix=settings.redis_key_prefix,
            ttl_seconds=settings.profile_ttl_seconds,
        )
    raise ValueError(f"Unknown profile store backend: {backend}")
