from __future__ import annotations

import logging

from ipa_client.application.constants import PRIVATE_INIT_DOMAIN, PRIVATE_INIT_PATH
from ipa_client.application.dtos.bag_dto import BagOutput, BagResultDTO
from ipa_client.application.ports.http_client_port import HttpClientPort, Method, Request, ResponseFormat
from ipa_client.application.ports.machine_port import MachinePort
from ipa_client.exceptions import AppStoreError, IpaClientError, MachineError, UnexpectedStatusError

log = logging.getLogger(__name__)


class FetchBagUseCase:
    """Discovers the authentication endpoint from the device bag.

    The bag is keyed by a GUID derived from the machine MAC address.
    """

    def __init__(self, client: HttpClientPort[BagResultDTO], machine: MachinePort) -> None:
        self.client = client
        self.machine = machine

    def execute(self) -> BagOutput:
        try:
            mac_address = self.machine.mac_address()
        except Exception as e:
            raise MachineError(f"failed to get mac address: {e}") from e

        guid = mac_address.upper().replace(":", "")
        try:
            res = self.client.send(self.bag_request(guid))
        except IpaClientError as e:
            raise AppStoreError(f"failed to send http request: {e}") from e

        if res.status_code != 200:
            log.debug("bag request returned %d", res.status_code)
            raise UnexpectedStatusError(res.status_code)

        return BagOutput(auth_endpoint=res.data.url_bag.auth_endpoint)

    @staticmethod
    def bag_request(guid: str) -> Request:
        return Request(
            url=f"https://{PRIVATE_INIT_DOMAIN}{PRIVATE_INIT_PATH}?guid={guid}",
            method=Method.GET,
            response_format=ResponseFormat.XML,
            headers={"Accept": "application/xml"},
        )
