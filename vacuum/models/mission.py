from dataclasses import dataclass


@dataclass(frozen=True)
class Mission:
    id: int
    name: str
    description: str
    type_name: str
