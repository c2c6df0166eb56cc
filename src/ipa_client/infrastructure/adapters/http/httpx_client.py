from __future__ import annotations

import logging
import plistlib
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from ipa_client.application.ports.cookie_jar_port import CookieJarPort, as_cookiejar
from ipa_client.application.ports.http_client_port import (
    HttpClientPort,
    Method,
    R,
    Request,
    ResponseFormat,
    Result,
)
from ipa_client.exceptions import (
    CookieSaveError,
    DecodeError,
    PayloadError,
    RequestCreationError,
    RequestFailedError,
    ResponseReadError,
    UnsupportedFormatError,
)
from ipa_client.infrastructure.adapters.http.header_transport import AddHeaderTransport
from ipa_client.infrastructure.adapters.http.plist_body import normalize_plist_body

log = logging.getLogger(__name__)

APP_STORE_AUTH_URL = "https://buy.itunes.apple.com/WebObjects/MZFinance.woa/wa/authenticate"
DEFAULT_MAX_REDIRECTS = 20


def redirect_referer(previous: httpx.Request, next_request: httpx.Request, explicit: str | None) -> str:
    """Referer carried by a redirect hop.

    Empty on an https to http downgrade. Otherwise the caller's own Referer,
    falling back to the URL of the previous hop stripped of credentials.
    """
    if previous.url.scheme == "https" and next_request.url.scheme == "http":
        return ""
    if explicit:
        return explicit
    url = previous.url
    if url.userinfo:
        url = url.copy_with(username=None, password=None)
    return str(url)


def should_follow_redirect(referer: str) -> bool:
    """Redirects are followed unless they were issued for the authentication endpoint.

    The comparison is an exact match on the hop's Referer. The response at
    that hop carries headers and a body the authentication flow needs.
    """
    return referer != APP_STORE_AUTH_URL


def flatten_headers(headers: httpx.Headers) -> httpx.Headers:
    """Collapses multi-valued headers into one value joined with ``"; "``."""
    flat: dict[str, str] = {}
    for key in headers.keys():
        flat[key] = "; ".join(headers.get_list(key))
    return httpx.Headers(flat)


class HttpxClient(HttpClientPort[R]):
    """Typed client backed by a persistent httpx.Client.

    - Sends through :class:`AddHeaderTransport`, which supplies the default User-Agent
    - Never times out and never retries; one call is one round trip
    - Persists the shared cookie jar after every response
    - Decodes JSON directly and XML after plist body normalization

    Args:
        result_type: Type the response body is validated into (any type pydantic accepts).
        cookie_jar: Shared cookie jar, saved after each round trip.
        transport: Underlying transport. Defaults to ``httpx.HTTPTransport()``.
        max_redirects: Redirect hops followed before giving up.
    """

    def __init__(
        self,
        result_type: type[R] | Any,
        *,
        cookie_jar: CookieJarPort,
        transport: httpx.BaseTransport | None = None,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ) -> None:
        self._adapter: TypeAdapter[R] = TypeAdapter(result_type)
        self._cookie_jar = cookie_jar
        self._max_redirects = max_redirects
        self._client = httpx.Client(
            cookies=as_cookiejar(cookie_jar),
            transport=AddHeaderTransport(transport or httpx.HTTPTransport()),
            timeout=None,
            follow_redirects=False,
        )
        # httpx ships its own User-Agent; the transport must only see the caller's.
        del self._client.headers["User-Agent"]

    def __enter__(self) -> HttpxClient[R]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def send(self, request: Request) -> Result[R]:
        """Performs the request and decodes the body according to its response format.

        Raises:
            UnsupportedFormatError: before any I/O, if the format is neither JSON nor XML.
            PayloadError: if the payload cannot be serialized.
            RequestCreationError: on a malformed method or URL.
            RequestFailedError: on any network or redirect failure.
            CookieSaveError: if the cookie jar cannot be persisted.
            ResponseReadError: if the body stream fails.
            DecodeError: if the body does not decode into the result type.
        """
        response_format = self._response_format(request.response_format)

        body = b""
        if request.payload is not None:
            try:
                body = request.payload.data()
            except Exception as e:
                raise PayloadError(f"failed to get payload data: {e}") from e

        http_request = self._new_request(request.method, request.url, body)
        for key, value in request.headers.items():
            http_request.headers[key] = value

        try:
            response = self._do(http_request)
        except httpx.HTTPError as e:
            raise RequestFailedError(f"request failed: {e}") from e

        try:
            try:
                self._cookie_jar.save()
            except Exception as e:
                raise CookieSaveError(f"failed to save cookies: {e}") from e

            if response_format is ResponseFormat.JSON:
                return self._handle_json_response(response)
            return self._handle_xml_response(response)
        finally:
            response.close()

    @staticmethod
    def _response_format(value: ResponseFormat | str) -> ResponseFormat:
        try:
            return ResponseFormat(value)
        except ValueError:
            raise UnsupportedFormatError(f"content type is not supported ({value})") from None

    def _new_request(self, method: Method | str, url: str, body: bytes) -> httpx.Request:
        try:
            http_method = Method(str(method).upper())
            http_request = self._client.build_request(http_method.value, url, content=body or None)
        except (ValueError, TypeError, httpx.InvalidURL) as e:
            raise RequestCreationError(f"failed to create request: {e}") from e

        if http_request.url.scheme not in ("http", "https") or not http_request.url.host:
            raise RequestCreationError(f"failed to create request: invalid url {url!r}")
        return http_request

    def _do(self, http_request: httpx.Request) -> httpx.Response:
        response = self._client.send(http_request, follow_redirects=False, stream=True)
        log.debug("%s %s -> %d", http_request.method, http_request.url, response.status_code)

        explicit_referer = http_request.headers.get("Referer")
        redirects = 0
        while response.next_request is not None:
            next_request = response.next_request
            referer = redirect_referer(response.request, next_request, explicit_referer)
            if not should_follow_redirect(referer):
                log.debug("not following redirect to %s", next_request.url)
                return response
            if referer:
                next_request.headers["Referer"] = referer
            else:
                next_request.headers.pop("Referer", None)

            response.close()
            if redirects >= self._max_redirects:
                raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=next_request)

            response = self._client.send(next_request, follow_redirects=False, stream=True)
            redirects += 1
            log.debug("%s %s -> %d (redirect %d)", next_request.method, next_request.url, response.status_code, redirects)

        return response

    @staticmethod
    def _read_body(response: httpx.Response) -> bytes:
        try:
            return response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise ResponseReadError(f"failed to read response body: {e}") from e

    def _handle_json_response(self, response: httpx.Response) -> Result[R]:
        body = self._read_body(response)
        try:
            data = self._adapter.validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"failed to unmarshal json: {e}") from e

        return Result(status_code=response.status_code, headers=flatten_headers(response.headers), data=data)

    def _handle_xml_response(self, response: httpx.Response) -> Result[R]:
        self._read_body(response)
        normalized = normalize_plist_body(response.text)
        try:
            raw = plistlib.loads(normalized.encode("utf-8"), fmt=plistlib.FMT_XML)
        except Exception as e:
            # plistlib also reports malformed values as AttributeError or IndexError
            raise DecodeError(f"failed to unmarshal xml: {e}") from e

        try:
            data = self._adapter.validate_python(raw)
        except ValidationError as e:
            raise DecodeError(f"failed to unmarshal xml: {e}") from e

        return Result(status_code=response.status_code, headers=flatten_headers(response.headers), data=data)
