from dataclasses import field
from typing import Any

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from .param import ParamValue
from .task_ref import TaskRef


@dataclass(frozen=True)
class Artifact:
    name: str
    description: str = ""
    value: ParamValue = field(default_factory=ParamValue)
    task_ref: TaskRef | None = None
    type: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _value_from_raw(cls, raw: Any) -> ParamValue:
        return ParamValue.from_raw(raw)


@dataclass(frozen=True)
class Artifacts:
    inputs: list[Artifact] = field(default_factory=list)
    outputs: list[Artifact] = field(default_factory=list)
