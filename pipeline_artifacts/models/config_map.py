from dataclasses import field

from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ConfigMap:
    name: str
    data: dict[str, str] = field(default_factory=dict)
