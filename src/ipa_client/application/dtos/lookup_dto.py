from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ipa_client.domain.entities.app import App


class AppDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="trackId")
    bundle_id: str = Field(default="", alias="bundleId")
    name: str = Field(default="", alias="trackName")
    version: str = ""
    price: float = 0.0

    def to_domain(self) -> App:
        return App(id=self.id, bundle_id=self.bundle_id, name=self.name, version=self.version, price=self.price)


class LookupResultDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(default=0, alias="resultCount")
    results: list[AppDTO] = Field(default_factory=list)
