from enum import Enum

from ipa_client.exceptions import InvalidDeviceFamilyError


class DeviceFamily(str, Enum):
    PHONE = "iPhone"
    PAD = "iPad"

    @classmethod
    def parse(cls, value: str) -> "DeviceFamily":
        try:
            return cls(value)
        except ValueError:
            raise InvalidDeviceFamilyError(f"device family is not supported: {value}") from None

    @property
    def lookup_entity(self) -> str:
        """Value of the ``entity`` lookup parameter for this family."""
        return "software" if self is DeviceFamily.PHONE else "iPadSoftware"
