from dataclasses import replace

from pipeline_artifacts.models import ParamType, v1, v1beta1

from .field_mapping import FieldMapping, RecordMapping
from .param import convert_param_from, convert_param_to

BUNDLES_RESOLVER = "bundles"

TASK_REF_MAPPING = RecordMapping(
    source_type=v1beta1.TaskRef,
    sink_type=v1.TaskRef,
    fields=(
        FieldMapping.copy("name"),
        FieldMapping.copy("kind"),
        FieldMapping.copy("api_version"),
        FieldMapping.copy("resolver"),
        FieldMapping.sequence("params", convert_param_to, convert_param_from),
    ),
    source_only=("bundle",),
)


def convert_task_ref_to(ref: v1beta1.TaskRef) -> v1.TaskRef:
    sink = TASK_REF_MAPPING.convert_to(ref)
    if not ref.bundle:
        return sink
    # bundle references are expressed through the bundles resolver in v1
    return replace(
        sink,
        name="",
        resolver=BUNDLES_RESOLVER,
        params=[
            v1.Param(name="bundle", value=v1.ParamValue(type=ParamType.STRING, string_val=ref.bundle)),
            v1.Param(name="name", value=v1.ParamValue(type=ParamType.STRING, string_val=ref.name)),
            v1.Param(name="kind", value=v1.ParamValue(type=ParamType.STRING, string_val="Task")),
        ],
    )


def convert_task_ref_from(ref: v1.TaskRef) -> v1beta1.TaskRef:
    return TASK_REF_MAPPING.convert_from(ref)
