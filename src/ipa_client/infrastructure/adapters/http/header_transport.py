from __future__ import annotations

import logging

import httpx

from ipa_client.exceptions import RoundTripError

log = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Configurator/2.17 (Macintosh; OS X 15.2; 24C5089c) AppleWebKit/0620.1.16.11.6"


class AddHeaderTransport(httpx.BaseTransport):
    """Transport decorator that sets a default User-Agent before delegating.

    A caller-supplied User-Agent is left untouched. Transport failures from
    the wrapped transport are re-raised as :class:`RoundTripError`.
    """

    def __init__(self, transport: httpx.BaseTransport, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self._transport = transport
        self._user_agent = user_agent

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        if not request.headers.get("User-Agent"):
            request.headers["User-Agent"] = self._user_agent

        try:
            return self._transport.handle_request(request)
        except httpx.TransportError as e:
            log.debug("round trip to %s failed: %s", request.url, e)
            raise RoundTripError(f"failed to make round trip: {e}", request=request) from e

    def close(self) -> None:
        self._transport.close()
