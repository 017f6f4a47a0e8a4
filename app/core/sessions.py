"""
Server-side session storage.

The browser only holds an opaque session id (signed, see app.security); the
key-value bag lives here. Handlers receive the store through the
``get_session_store`` dependency, which reads it from ``app.state``.
"""
import secrets
import threading
import time
from typing import Any, Callable


class SessionStore:
    """Interface: maps an opaque session token to a small key-value bag."""

    def create(self, data: dict[str, Any]) -> str:
        raise NotImplementedError

    def get(self, token: str) -> dict[str, Any] | None:
        raise NotImplementedError

    def set(self, token: str, data: dict[str, Any]) -> None:
        raise NotImplementedError

    def destroy(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    """In-process store; entries expire ``max_age`` seconds after they were last written."""

    def __init__(self, max_age: int, clock: Callable[[], float] = time.monotonic):
        self.max_age = max_age
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[float, dict[str, Any]]] = {}

    def create(self, data: dict[str, Any]) -> str:
        self.purge_expired()
        token = secrets.token_urlsafe(32)
        self.set(token, data)
        return token

    def get(self, token: str) -> dict[str, Any] | None:
        with self._lock:
            entry = self._entries.get(token)
            if entry is None:
                return None
            expires_at, data = entry
            if expires_at <= self._clock():
                del self._entries[token]
                return None
            return dict(data)

    def set(self, token: str, data: dict[str, Any]) -> None:
        with self._lock:
            self._entries[token] = (self._clock() + self.max_age, dict(data))

    def destroy(self, token: str) -> None:
        with self._lock:
            self._entries.pop(token, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            stale = [t for t, (exp, _) in self._entries.items() if exp <= now]
            for t in stale:
                del self._entries[t]
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
