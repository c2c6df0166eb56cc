from __future__ import annotations

import uuid

from ipa_client.application.ports.machine_port import MachinePort
from ipa_client.exceptions import MachineError


class SystemMachine(MachinePort):
    """Reads the host MAC address through :func:`uuid.getnode`."""

    def mac_address(self) -> str:
        node = uuid.getnode()
        # getnode() falls back to a random number with the multicast bit set
        if (node >> 40) & 1:
            raise MachineError("no hardware address found")
        return ":".join(f"{(node >> shift) & 0xFF:02x}" for shift in range(40, -1, -8))
