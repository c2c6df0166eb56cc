import pytest

from ipa_client.exceptions import MachineError
from ipa_client.infrastructure.adapters.machine import system_machine
from ipa_client.infrastructure.adapters.machine.system_machine import SystemMachine


def test_formats_hardware_address(monkeypatch):
    monkeypatch.setattr(system_machine.uuid, "getnode", lambda: 0xAABBCCDDEEF0)
    assert SystemMachine().mac_address() == "aa:bb:cc:dd:ee:f0"


def test_random_node_is_rejected(monkeypatch):
    monkeypatch.setattr(system_machine.uuid, "getnode", lambda: 0x010000000001)
    with pytest.raises(MachineError):
        SystemMachine().mac_address()
