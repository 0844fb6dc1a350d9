from dataclasses import field

import pytest
from pydantic.dataclasses import dataclass

from pipeline_artifacts.conversion import ARTIFACT_MAPPING, ARTIFACTS_MAPPING, FieldMapping, RecordMapping
from pipeline_artifacts.errors import ConversionError, SchemaMappingError


@dataclass(frozen=True)
class OldRecord:
    name: str
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NewRecord:
    name: str
    tags: list[str] = field(default_factory=list)
    owner: str = ""


def test_artifact_mappings_cover_both_schemas():
    assert {f.source_field for f in ARTIFACT_MAPPING.fields} == {"name", "type", "description", "value", "task_ref"}
    assert {f.source_field for f in ARTIFACTS_MAPPING.fields} == {"inputs", "outputs"}


def test_unmapped_sink_field_is_rejected():
    with pytest.raises(SchemaMappingError, match="owner"):
        RecordMapping(OldRecord, NewRecord, (FieldMapping.copy("name"), FieldMapping.copy("tags")))


def test_unknown_field_is_rejected():
    with pytest.raises(SchemaMappingError, match="unknown"):
        RecordMapping(
            OldRecord,
            NewRecord,
            (FieldMapping.copy("name"), FieldMapping.copy("tags"), FieldMapping.copy("labels")),
            sink_only=("owner",),
        )


def test_declared_one_sided_field_is_accepted():
    mapping = RecordMapping(OldRecord, NewRecord, (FieldMapping.copy("name"), FieldMapping.copy("tags")), sink_only=("owner",))
    assert mapping.convert_to(OldRecord(name="n", tags=["t"])) == NewRecord(name="n", tags=["t"])
    assert mapping.convert_from(NewRecord(name="n", owner="me")) == OldRecord(name="n")


def test_field_failure_is_wrapped():
    def explode(value):
        raise RuntimeError("boom")

    mapping = RecordMapping(
        OldRecord,
        NewRecord,
        (FieldMapping.copy("name"), FieldMapping("tags", "tags", explode, explode)),
        sink_only=("owner",),
    )
    with pytest.raises(ConversionError, match="tags") as exc:
        mapping.convert_to(OldRecord(name="n"))
    assert isinstance(exc.value.__cause__, RuntimeError)
