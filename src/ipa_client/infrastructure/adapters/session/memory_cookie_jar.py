from __future__ import annotations

from http.cookiejar import CookieJar

from ipa_client.application.ports.cookie_jar_port import CookieJarPort


class MemoryCookieJar(CookieJar, CookieJarPort):
    """Simple in-memory jar for development. Not persistent."""

    def __init__(self) -> None:
        super().__init__()
        self.saves = 0

    def save(self) -> None:
        self.saves += 1
