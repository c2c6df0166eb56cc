from __future__ import annotations

import logging
from http.cookiejar import LoadError, LWPCookieJar
from pathlib import Path

from ipa_client.application.ports.cookie_jar_port import CookieJarPort
from ipa_client.exceptions import CookieLoadError

log = logging.getLogger(__name__)


class FileCookieJar(LWPCookieJar, CookieJarPort):
    """File-backed cookie jar. Persists cookies across processes.

    The file is loaded on construction when it exists and rewritten on every
    ``save``. Session and expired cookies are kept so that a later process
    sees exactly what the server last set.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        super().__init__(str(self._path))
        if self._path.exists():
            try:
                self.load(ignore_discard=True, ignore_expires=True)
            except (LoadError, OSError) as e:
                raise CookieLoadError(f"failed to load cookies from {self._path}: {e}") from e
            log.debug("loaded %d cookies from %s", len(self), self._path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, filename: str | None = None, ignore_discard: bool = True, ignore_expires: bool = True) -> None:
        # http.cookiejar iterates the jar without taking its lock
        with self._cookies_lock:
            target = Path(filename) if filename else self._path
            target.parent.mkdir(parents=True, exist_ok=True)
            super().save(str(target), ignore_discard=ignore_discard, ignore_expires=ignore_expires)
