from __future__ import annotations

from http.cookiejar import CookieJar
from typing import Protocol


class CookieJarPort(Protocol):
    """Persistent cookie store shared by every client built with it.

    Implementations are expected to subclass :class:`http.cookiejar.CookieJar`
    so httpx can read and update them; ``save`` flushes to durable storage.
    """

    def save(self) -> None:
        """Persist in-memory cookie state. Raises on failure."""
        ...


def as_cookiejar(jar: CookieJarPort) -> CookieJar:
    if not isinstance(jar, CookieJar):
        raise TypeError(f"cookie jar must be a http.cookiejar.CookieJar, got {type(jar).__name__}")
    return jar
