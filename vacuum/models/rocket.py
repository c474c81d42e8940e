from dataclasses import dataclass


@dataclass(frozen=True)
class Rocket:
    id: int
    name: str
    configuration: str
