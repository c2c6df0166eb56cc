from ipa_client.exceptions import InvalidCountryCodeError

# ISO 3166-1 alpha-2 country code -> App Store storefront identifier
STORE_FRONTS: dict[str, str] = {
    "AU": "143460",
    "BR": "143503",
    "CA": "143455",
    "CH": "143459",
    "CN": "143465",
    "DE": "143443",
    "ES": "143454",
    "FR": "143442",
    "GB": "143444",
    "IN": "143467",
    "IT": "143450",
    "JP": "143462",
    "KR": "143466",
    "MX": "143468",
    "NL": "143452",
    "RU": "143469",
    "SE": "143456",
    "US": "143441",
}


class CountryCode(str):
    """Value object for a country code with a known storefront."""

    def __new__(cls, value: str) -> "CountryCode":
        code = value.strip().upper()
        if code not in STORE_FRONTS:
            raise InvalidCountryCodeError(f"invalid country code: {value}")
        return str.__new__(cls, code)

    @property
    def store_front(self) -> str:
        return STORE_FRONTS[self]
