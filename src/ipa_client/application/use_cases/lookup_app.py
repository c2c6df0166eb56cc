from __future__ import annotations

import logging
from urllib.parse import urlencode

from ipa_client.application.constants import ITUNES_API_DOMAIN, ITUNES_API_PATH_LOOKUP
from ipa_client.application.dtos.lookup_dto import LookupResultDTO
from ipa_client.application.ports.http_client_port import HttpClientPort, Method, Request, ResponseFormat
from ipa_client.domain.entities.app import App
from ipa_client.domain.value_objects.device_family import DeviceFamily
from ipa_client.domain.value_objects.storefront import CountryCode
from ipa_client.exceptions import AppNotFoundError, AppStoreError, IpaClientError, UnexpectedStatusError

log = logging.getLogger(__name__)


class LookupAppUseCase:
    """Resolves a bundle identifier to the App Store listing for one country."""

    def __init__(self, client: HttpClientPort[LookupResultDTO]) -> None:
        self.client = client

    def execute(self, bundle_id: str, country_code: str, device_family: str = DeviceFamily.PHONE) -> App:
        country = CountryCode(country_code)
        family = DeviceFamily.parse(device_family)

        try:
            res = self.client.send(self.lookup_request(bundle_id, country, family))
        except IpaClientError as e:
            raise AppStoreError(f"failed to send http request: {e}") from e

        if res.status_code != 200:
            log.debug("lookup for %s returned %d: %s", bundle_id, res.status_code, res.data)
            raise UnexpectedStatusError(res.status_code)

        if not res.data.results:
            raise AppNotFoundError(f"app not found: {bundle_id}")

        return res.data.results[0].to_domain()

    @staticmethod
    def lookup_request(bundle_id: str, country: CountryCode, family: DeviceFamily) -> Request:
        return Request(
            url=LookupAppUseCase.lookup_url(bundle_id, country, family),
            method=Method.GET,
            response_format=ResponseFormat.JSON,
        )

    @staticmethod
    def lookup_url(bundle_id: str, country: CountryCode, family: DeviceFamily) -> str:
        params = urlencode(
            {
                "entity": family.lookup_entity,
                "limit": "1",
                "media": "software",
                "bundleId": bundle_id,
                "country": str(country),
            }
        )
        return f"https://{ITUNES_API_DOMAIN}{ITUNES_API_PATH_LOOKUP}?{params}"
