from __future__ import annotations

from typing import Protocol


class MachinePort(Protocol):
    def mac_address(self) -> str:
        """Returns the host MAC address as ``aa:bb:cc:dd:ee:ff``. Raises on failure."""
        ...
