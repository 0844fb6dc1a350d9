import dataclasses
from collections.abc import Callable
from typing import Any

from pipeline_artifacts.errors import ConversionError, SchemaMappingError

Converter = Callable[[Any], Any]


def identity(value: Any) -> Any:
    return value


@dataclasses.dataclass(frozen=True)
class FieldMapping:
    source_field: str
    sink_field: str
    convert_to: Converter = identity
    convert_from: Converter = identity

    @classmethod
    def copy(cls, name: str) -> "FieldMapping":
        return cls(name, name)

    @classmethod
    def sequence(cls, name: str, convert_to: Converter, convert_from: Converter) -> "FieldMapping":
        return cls(
            name,
            name,
            lambda items: [convert_to(i) for i in items],
            lambda items: [convert_from(i) for i in items],
        )

    @classmethod
    def optional(cls, name: str, convert_to: Converter, convert_from: Converter) -> "FieldMapping":
        return cls(
            name,
            name,
            lambda v: None if v is None else convert_to(v),
            lambda v: None if v is None else convert_from(v),
        )


@dataclasses.dataclass(frozen=True)
class RecordMapping:
    source_type: type
    sink_type: type
    fields: tuple[FieldMapping, ...]
    # fields with no counterpart on the other side, handled outside the table
    source_only: tuple[str, ...] = ()
    sink_only: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        self._check_coverage(self.source_type, {f.source_field for f in self.fields}, self.source_only)
        self._check_coverage(self.sink_type, {f.sink_field for f in self.fields}, self.sink_only)

    @staticmethod
    def _check_coverage(record_type: type, mapped: set[str], excluded: tuple[str, ...]) -> None:
        declared = {f.name for f in dataclasses.fields(record_type)}
        accounted = mapped | set(excluded)
        missing = sorted(declared - accounted)
        unknown = sorted(accounted - declared)
        if missing:
            raise SchemaMappingError(f"Fields of {record_type.__qualname__} without a mapping: {', '.join(missing)}")
        if unknown:
            raise SchemaMappingError(f"Mapping names fields unknown to {record_type.__qualname__}: {', '.join(unknown)}")

    def convert_to(self, source: Any) -> Any:
        values = {}
        for f in self.fields:
            values[f.sink_field] = self._convert(f.source_field, f.convert_to, getattr(source, f.source_field))
        return self.sink_type(**values)

    def convert_from(self, sink: Any) -> Any:
        values = {}
        for f in self.fields:
            values[f.source_field] = self._convert(f.sink_field, f.convert_from, getattr(sink, f.sink_field))
        return self.source_type(**values)

    def _convert(self, field_name: str, converter: Converter, value: Any) -> Any:
        try:
            return converter(value)
        except ConversionError:
            raise
        except Exception as e:
            raise ConversionError(f"Failed to convert field {field_name} of {self.source_type.__qualname__}: {e}") from e
