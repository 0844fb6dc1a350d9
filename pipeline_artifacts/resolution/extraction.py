from pipeline_artifacts.models import ArtifactRef, ParamType
from pipeline_artifacts.models.v1beta1 import Artifact, Param, PipelineTask, WhenExpression

from .expressions import new_artifact_refs
from .substitution import extract_variable_expressions


def get_var_substitution_expressions_for_param(param: Param) -> tuple[list[str], bool]:
    expressions: list[str] = []
    match param.value.type:
        case ParamType.STRING:
            expressions.extend(extract_variable_expressions(param.value.string_val))
        case ParamType.ARRAY:
            for v in param.value.array_val:
                expressions.extend(extract_variable_expressions(v))
        case ParamType.OBJECT:
            for v in param.value.object_val.values():
                expressions.extend(extract_variable_expressions(v))
        case _:
            return [], False
    return expressions, len(expressions) != 0


def get_var_substitution_expressions_for_when(when: WhenExpression) -> tuple[list[str], bool]:
    expressions = extract_variable_expressions(when.input)
    for v in when.values:
        expressions.extend(extract_variable_expressions(v))
    return expressions, len(expressions) != 0


def get_var_substitution_expressions_for_pipeline_artifact(artifact: Artifact) -> tuple[list[str], bool]:
    expressions = extract_variable_expressions(artifact.value.string_val)
    for v in artifact.value.array_val:
        expressions.extend(extract_variable_expressions(v))
    for v in artifact.value.object_val.values():
        expressions.extend(extract_variable_expressions(v))
    return expressions, len(expressions) != 0


def get_var_substitution_expressions_for_input_artifact(artifact: Artifact) -> tuple[list[str], bool]:
    expressions: list[str] = []
    match artifact.value.type:
        case ParamType.STRING:
            expressions.extend(extract_variable_expressions(artifact.value.string_val))
        case ParamType.OBJECT:
            for v in artifact.value.object_val.values():
                expressions.extend(extract_variable_expressions(v))
        case _:
            return [], False
    return expressions, len(expressions) != 0


def pipeline_task_artifact_refs(task: PipelineTask) -> list[ArtifactRef]:
    refs: list[ArtifactRef] = []
    for param in task.all_params():
        expressions, _ = get_var_substitution_expressions_for_param(param)
        refs.extend(new_artifact_refs(expressions))
    for when in task.when:
        expressions, _ = get_var_substitution_expressions_for_when(when)
        refs.extend(new_artifact_refs(expressions))
    if task.artifacts is not None:
        for artifact in task.artifacts.inputs:
            expressions, _ = get_var_substitution_expressions_for_input_artifact(artifact)
            refs.extend(new_artifact_refs(expressions))
    return refs
