from dataclasses import field

from pydantic.dataclasses import dataclass

from .param import Param


@dataclass(frozen=True)
class TaskRef:
    name: str = ""
    kind: str = ""
    api_version: str = ""
    resolver: str = ""
    params: list[Param] = field(default_factory=list)
