"""
Key-value storage for the portal collections.

Every collection lives as one JSON document under a fixed string key.
Backends only deal in strings; JsonStorage owns encoding, decoding and the
error policy. In production the sqlite backend keeps data across restarts,
the memory backend mirrors a browser's localStorage for a single process.
"""
import json
import os
import sqlite3
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class StorageError(Exception):
    """Base class for key-value storage failures."""

    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


class StorageUnavailableError(StorageError):
    """No key-value store is available in this context."""


class CorruptDataError(StorageError):
    """The stored value is not valid JSON."""


class StorageWriteError(StorageError):
    """The value could not be serialized or written."""


class QuotaExceededError(StorageWriteError):
    """Writing the value would exceed the backend's size quota."""


class KeyValueBackend(ABC):
    """Synchronous string key-value store."""

    available: bool = True

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass

    def close(self) -> None:
        """Release any resources held by the backend."""


class MemoryBackend(KeyValueBackend):
    """Process-local store with an optional quota on stored key and value characters."""

    def __init__(self, quota_chars: Optional[int] = None):
        # key -> serialized JSON
        self.items: Dict[str, str] = {}
        self.quota_chars = quota_chars

    def _size_with(self, key: str, value: str) -> int:
        size = sum(len(k) + len(v) for k, v in self.items.items() if k != key)
        return size + len(key) + len(value)

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_chars is not None and self._size_with(key, value) > self.quota_chars:
            raise QuotaExceededError(key, f"exceeds the {self.quota_chars} character quota")
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self.items.keys())


class SqliteBackend(KeyValueBackend):
    """Key-value table in a SQLite file, opened lazily on first use."""

    def __init__(self, db_path: str):
        self.db_path = os.path.abspath(db_path)
        self.conn = None

    def init(self):
        """Open the database and create the table"""
        print("🔄 Initializing key-value store...")
        os.makedirs(os.path.dirname(self.db_path), exist_ok=True)
        self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self.create_table()
        print(f"✅ Key-value store ready. DB: {self.db_path}")

    def create_table(self):
        cursor = self.conn.cursor()
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS kv_entries (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        self.conn.commit()

    def _connection(self) -> sqlite3.Connection:
        if not self.conn:
            self.init()
        return self.conn

    def get_item(self, key: str) -> Optional[str]:
        try:
            cursor = self._connection().cursor()
            cursor.execute("SELECT value FROM kv_entries WHERE key = ?", (key,))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            raise StorageUnavailableError(key, str(e)) from e
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        try:
            conn = self._connection()
            conn.execute(
                "INSERT OR REPLACE INTO kv_entries (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)",
                (key, value),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageWriteError(key, str(e)) from e

    def remove_item(self, key: str) -> None:
        try:
            conn = self._connection()
            conn.execute("DELETE FROM kv_entries WHERE key = ?", (key,))
            conn.commit()
        except sqlite3.Error as e:
            raise StorageWriteError(key, str(e)) from e

    def keys(self) -> List[str]:
        cursor = self._connection().cursor()
        cursor.execute("SELECT key FROM kv_entries ORDER BY key")
        return [row[0] for row in cursor.fetchall()]

    def close(self) -> None:
        if self.conn:
            self.conn.close()
            self.conn = None


class NullBackend(KeyValueBackend):
    """Stand-in for contexts with no store: reads miss, writes vanish."""

    available = False

    def get_item(self, key: str) -> Optional[str]:
        return None

    def set_item(self, key: str, value: str) -> None:
        return None

    def remove_item(self, key: str) -> None:
        return None

    def keys(self) -> List[str]:
        return []


class JsonStorage:
    """
    JSON adapter over a key-value backend.

    load/store raise StorageError subclasses. get/set are the forgiving
    variants used by the portal stores: failures are logged, reads come back
    as None and writes are dropped.
    """

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    @property
    def available(self) -> bool:
        return self.backend.available

    def load(self, key: str) -> Any:
        """Read and decode a value, None when the key is absent."""
        if not self.available:
            raise StorageUnavailableError(key, "no key-value store available")
        raw = self.backend.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise CorruptDataError(key, f"invalid JSON ({e})") from e

    def store(self, key: str, value: Any) -> None:
        """Encode and write a value."""
        if not self.available:
            raise StorageUnavailableError(key, "no key-value store available")
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(key, f"value is not JSON serializable ({e})") from e
        self.backend.set_item(key, payload)

    def get(self, key: str) -> Any:
        if not self.available:
            return None
        try:
            return self.load(key)
        except StorageError as e:
            print(f"❌ Error retrieving {key} from storage: {e}")
            return None

    def set(self, key: str, value: Any) -> bool:
        """Write a value; returns False when the write was dropped."""
        if not self.available:
            return False
        try:
            self.store(key, value)
            return True
        except StorageError as e:
            print(f"❌ Error saving {key} to storage: {e}")
            return False

    def remove(self, key: str) -> None:
        if not self.available:
            return
        try:
            self.backend.remove_item(key)
        except StorageError as e:
            print(f"❌ Error removing {key} from storage: {e}")


def build_storage(settings) -> JsonStorage:
    """Create the JSON storage for the configured backend."""
    if settings.storage_backend == "sqlite":
        backend: KeyValueBackend = SqliteBackend(settings.storage_path)
    elif settings.storage_backend == "null":
        backend = NullBackend()
    else:
        backend = MemoryBackend(quota_chars=settings.storage_quota_chars)
    return JsonStorage(backend)
