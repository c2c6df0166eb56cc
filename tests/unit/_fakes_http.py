from __future__ import annotations

from typing import Any

import httpx

from ipa_client.application.ports.http_client_port import Request, Result
from ipa_client.infrastructure.adapters.http.httpx_client import HttpxClient
from ipa_client.infrastructure.adapters.session.memory_cookie_jar import MemoryCookieJar


class Recorder:
    """MockTransport handler that records requests and answers from a callable."""

    def __init__(self, respond) -> None:
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


def make_client(respond, result_type: Any = dict[str, Any], jar=None, **kwargs) -> tuple[HttpxClient[Any], Recorder, Any]:
    recorder = Recorder(respond)
    jar = jar if jar is not None else MemoryCookieJar()
    client = HttpxClient(result_type, cookie_jar=jar, transport=httpx.MockTransport(recorder), **kwargs)
    return client, recorder, jar


class FailingPayload:
    def data(self) -> bytes:
        raise RuntimeError("cannot encode")


class BrokenJar(MemoryCookieJar):
    def save(self) -> None:
        raise OSError("disk full")


class FakeClient:
    """Stand-in for HttpClientPort returning a canned result or raising."""

    def __init__(self, result: Result[Any] | None = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.requests: list[Request] = []

    def send(self, request: Request) -> Result[Any]:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        assert self.result is not None
        return self.result

    def __enter__(self) -> "FakeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        pass


class FakeMachine:
    def __init__(self, mac: str = "aa:bb:cc:dd:ee:ff", error: Exception | None = None) -> None:
        self.mac = mac
        self.error = error

    def mac_address(self) -> str:
        if self.error is not None:
            raise self.error
        return self.mac
