"""
Exceptions raised by the client and the App Store consumers built on it.

Every exception message starts with the stage that failed; the underlying
cause is chained via ``__cause__``.
"""

from __future__ import annotations

import httpx


class IpaClientError(Exception):
    """Base exception for all client errors."""


class PayloadError(IpaClientError):
    """Raised when a request payload cannot be serialized."""


class RequestCreationError(IpaClientError):
    """Raised when the method or URL cannot form a valid request."""


class RequestFailedError(IpaClientError):
    """Raised on connection, DNS, TLS, redirect or round trip failures."""


class CookieSaveError(IpaClientError):
    """Raised when the cookie jar cannot be persisted after a round trip."""


class CookieLoadError(IpaClientError):
    """Raised when a persisted cookie jar cannot be read back."""


class UnsupportedFormatError(IpaClientError):
    """Raised when a request asks for a response format the client cannot decode."""


class ResponseReadError(IpaClientError):
    """Raised when the response body stream fails while being read."""


class DecodeError(IpaClientError):
    """Raised when a body cannot be decoded into the requested result type."""


class RoundTripError(httpx.TransportError):
    """Transport-level failure raised by the header transport."""


class AppStoreError(IpaClientError):
    """Base exception for App Store endpoint consumers."""


class MachineError(AppStoreError):
    """Raised when the machine identifier cannot be determined."""


class InvalidCountryCodeError(AppStoreError):
    """Raised when a country code has no known storefront."""


class InvalidDeviceFamilyError(AppStoreError):
    """Raised when a device family is neither phone nor pad."""


class AppNotFoundError(AppStoreError):
    """Raised when a lookup returns no results."""


class UnexpectedStatusError(AppStoreError):
    """Raised when an endpoint answers with a status code other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"received unexpected status code: {status_code}")
        self.status_code = status_code
