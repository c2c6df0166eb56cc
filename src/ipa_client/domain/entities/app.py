from dataclasses import dataclass


@dataclass(frozen=True)
class App:
    id: int
    bundle_id: str
    name: str
    version: str
    price: float
