from dataclasses import field
from typing import Any

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from ..raw_value import ParamType, RawValueMixin


@dataclass(frozen=True)
class ParamValue(RawValueMixin):
    type: ParamType = ParamType.STRING
    string_val: str = ""
    array_val: list[str] = field(default_factory=list)
    object_val: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Param:
    name: str
    value: ParamValue = field(default_factory=ParamValue)

    @field_validator("value", mode="before")
    @classmethod
    def _value_from_raw(cls, raw: Any) -> ParamValue:
        return ParamValue.from_raw(raw)
