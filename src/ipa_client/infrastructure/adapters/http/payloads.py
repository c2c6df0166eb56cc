from __future__ import annotations

import plistlib
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from ipa_client.application.ports.payload_port import PayloadPort


class XMLPayload(PayloadPort):
    """Serializes a mapping as an XML property list document."""

    def __init__(self, content: Mapping[str, Any]) -> None:
        self.content = dict(content)

    def data(self) -> bytes:
        return plistlib.dumps(self.content, fmt=plistlib.FMT_XML)


class URLPayload(PayloadPort):
    """Serializes a mapping as an ``application/x-www-form-urlencoded`` body.

    Sequence values are expanded into repeated keys.
    """

    def __init__(self, content: Mapping[str, Any]) -> None:
        self.content = dict(content)

    def data(self) -> bytes:
        return urlencode(self.content, doseq=True).encode("utf-8")
