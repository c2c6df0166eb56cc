from __future__ import annotations

from typing import Protocol


class PayloadPort(Protocol):
    """Request body producer. Serialization happens on demand, per call."""

    def data(self) -> bytes:
        """Returns the serialized body. Raises on serialization failure."""
        ...
