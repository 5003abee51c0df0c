"""
Portal Session — Session Store Capability
=========================================
The persisted session lives under a single key as JSON text. The core
never touches ambient storage: a SessionStore is handed to whoever
needs it.
"""

from __future__ import annotations

from typing import Optional, Protocol

DEFAULT_SESSION_KEY = "user_session"


class SessionStore(Protocol):
    def read(self) -> Optional[str]:
        ...

    def write(self, text: str) -> None:
        ...

    def clear(self) -> None:
        ...


class InMemorySessionStore:
    """Single-slot store used by tests and non-web callers."""

    def __init__(self, text: Optional[str] = None) -> None:
        self._text = text

    def read(self) -> Optional[str]:
        return self._text

    def write(self, text: str) -> None:
        if not isinstance(text, str):
            raise ValueError("session record must be text.")
        self._text = text

    def clear(self) -> None:
        self._text = None


class DjangoSessionStore:
    """
    Keeps the session record under one key of a Django session
    (request.session). Any SessionBase-compatible mapping works.
    """

    def __init__(self, django_session, key: str = DEFAULT_SESSION_KEY) -> None:
        if not key or not isinstance(key, str):
            raise ValueError("key must be a non-empty string.")
        self._session = django_session
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> Optional[str]:
        value = self._session.get(self._key)
        if value is None:
            return None
        if not isinstance(value, str):
            # Only JSON text is a valid record; anything else reads as corrupt.
            return repr(value)
        return value

    def write(self, text: str) -> None:
        if not isinstance(text, str):
            raise ValueError("session record must be text.")
        self._session[self._key] = text

    def clear(self) -> None:
        self._session.pop(self._key, None)
