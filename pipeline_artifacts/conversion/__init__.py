from .artifact import (
    ARTIFACT_MAPPING,
    ARTIFACTS_MAPPING,
    convert_artifact_from,
    convert_artifact_to,
    convert_artifacts_from,
    convert_artifacts_to,
)
from .field_mapping import FieldMapping, RecordMapping
from .param import convert_param_value_from, convert_param_value_to
from .task_ref import convert_task_ref_from, convert_task_ref_to

__all__ = [
    "ARTIFACT_MAPPING",
    "ARTIFACTS_MAPPING",
    "FieldMapping",
    "RecordMapping",
    "convert_artifact_from",
    "convert_artifact_to",
    "convert_artifacts_from",
    "convert_artifacts_to",
    "convert_param_value_from",
    "convert_param_value_to",
    "convert_task_ref_from",
    "convert_task_ref_to",
]
