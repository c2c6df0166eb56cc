from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class URLBagDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    auth_endpoint: str = Field(default="", alias="authenticateAccount")


class BagResultDTO(BaseModel):
    """Subset of ``bag.xml`` the client reads."""

    model_config = ConfigDict(populate_by_name=True)

    url_bag: URLBagDTO = Field(default_factory=URLBagDTO, alias="urlBag")


@dataclass(frozen=True)
class BagOutput:
    auth_endpoint: str
