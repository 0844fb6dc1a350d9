from pipeline_artifacts.models import v1, v1beta1

from .field_mapping import FieldMapping, RecordMapping
from .param import convert_param_value_from, convert_param_value_to
from .task_ref import convert_task_ref_from, convert_task_ref_to

# Names are copied as-is: validation has already run against the source schema.
ARTIFACT_MAPPING = RecordMapping(
    source_type=v1beta1.Artifact,
    sink_type=v1.Artifact,
    fields=(
        FieldMapping.copy("name"),
        FieldMapping.copy("type"),
        FieldMapping.copy("description"),
        FieldMapping("value", "value", convert_param_value_to, convert_param_value_from),
        FieldMapping.optional("task_ref", convert_task_ref_to, convert_task_ref_from),
    ),
)


def convert_artifact_to(artifact: v1beta1.Artifact) -> v1.Artifact:
    return ARTIFACT_MAPPING.convert_to(artifact)


def convert_artifact_from(artifact: v1.Artifact) -> v1beta1.Artifact:
    return ARTIFACT_MAPPING.convert_from(artifact)


ARTIFACTS_MAPPING = RecordMapping(
    source_type=v1beta1.Artifacts,
    sink_type=v1.Artifacts,
    fields=(
        FieldMapping.sequence("inputs", convert_artifact_to, convert_artifact_from),
        FieldMapping.sequence("outputs", convert_artifact_to, convert_artifact_from),
    ),
)


def convert_artifacts_to(artifacts: v1beta1.Artifacts) -> v1.Artifacts:
    return ARTIFACTS_MAPPING.convert_to(artifacts)


def convert_artifacts_from(artifacts: v1.Artifacts) -> v1beta1.Artifacts:
    return ARTIFACTS_MAPPING.convert_from(artifacts)
