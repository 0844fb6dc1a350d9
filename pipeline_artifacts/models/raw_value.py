from enum import StrEnum
from typing import Any, Self


class ParamType(StrEnum):
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def scalar_text(value: Any) -> str:
    # YAML spelling, not Python's "True"/"False"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RawValueMixin:
    @classmethod
    def from_raw(cls, raw: Any) -> Self:
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls()
        if isinstance(raw, (str, int, float, bool)):
            return cls(type=ParamType.STRING, string_val=scalar_text(raw))
        if isinstance(raw, list):
            return cls(type=ParamType.ARRAY, array_val=[scalar_text(v) for v in raw])
        if isinstance(raw, dict):
            return cls(type=ParamType.OBJECT, object_val={scalar_text(k): scalar_text(v) for k, v in raw.items()})
        raise ValueError(f"Unsupported value of type {type(raw).__name__}")

    def to_raw(self) -> str | list[str] | dict[str, str]:
        match self.type:
            case ParamType.ARRAY:
                return list(self.array_val)
            case ParamType.OBJECT:
                return dict(self.object_val)
            case _:
                return self.string_val
