from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Protocol, TypeVar

from ipa_client.application.ports.payload_port import PayloadPort

R = TypeVar("R")
R_co = TypeVar("R_co", covariant=True)


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value


class ResponseFormat(str, Enum):
    JSON = "json"
    XML = "xml"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Request:
    """Wire-level description of a single call.

    ``response_format`` selects the decode path. Values outside
    :class:`ResponseFormat` are accepted here and rejected by the client.
    """

    url: str
    method: Method | str = Method.GET
    headers: Mapping[str, str] = field(default_factory=dict)
    response_format: ResponseFormat | str = ResponseFormat.JSON
    payload: PayloadPort | None = None


@dataclass(frozen=True)
class Result(Generic[R]):
    status_code: int
    headers: Mapping[str, str]
    data: R


class HttpClientPort(Protocol[R_co]):
    """Typed HTTP client: one request in, one decoded result out."""

    def send(self, request: Request) -> Result[R_co]: ...
