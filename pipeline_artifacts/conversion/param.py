from pipeline_artifacts.models import v1, v1beta1

from .field_mapping import FieldMapping, RecordMapping

PARAM_VALUE_MAPPING = RecordMapping(
    source_type=v1beta1.ParamValue,
    sink_type=v1.ParamValue,
    fields=(
        FieldMapping.copy("type"),
        FieldMapping.copy("string_val"),
        FieldMapping("array_val", "array_val", list, list),
        FieldMapping("object_val", "object_val", dict, dict),
    ),
)


def convert_param_value_to(value: v1beta1.ParamValue) -> v1.ParamValue:
    return PARAM_VALUE_MAPPING.convert_to(value)


def convert_param_value_from(value: v1.ParamValue) -> v1beta1.ParamValue:
    return PARAM_VALUE_MAPPING.convert_from(value)


PARAM_MAPPING = RecordMapping(
    source_type=v1beta1.Param,
    sink_type=v1.Param,
    fields=(
        FieldMapping.copy("name"),
        FieldMapping("value", "value", convert_param_value_to, convert_param_value_from),
    ),
)


def convert_param_to(param: v1beta1.Param) -> v1.Param:
    return PARAM_MAPPING.convert_to(param)


def convert_param_from(param: v1.Param) -> v1beta1.Param:
    return PARAM_MAPPING.convert_from(param)
