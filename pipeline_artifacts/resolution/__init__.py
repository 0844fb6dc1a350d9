from .expressions import (
    ArtifactExpression,
    looks_like_artifact_ref,
    looks_like_contains_artifact_refs,
    match_artifact_expression,
    new_artifact_refs,
    parse_artifact_expression,
    parse_artifact_name,
)
from .extraction import (
    get_var_substitution_expressions_for_input_artifact,
    get_var_substitution_expressions_for_param,
    get_var_substitution_expressions_for_pipeline_artifact,
    get_var_substitution_expressions_for_when,
    pipeline_task_artifact_refs,
)
from .names import is_valid_artifact_name, validate_artifact_name, validate_artifacts
from .substitution import extract_variable_expressions

__all__ = [
    "ArtifactExpression",
    "extract_variable_expressions",
    "get_var_substitution_expressions_for_input_artifact",
    "get_var_substitution_expressions_for_param",
    "get_var_substitution_expressions_for_pipeline_artifact",
    "get_var_substitution_expressions_for_when",
    "is_valid_artifact_name",
    "looks_like_artifact_ref",
    "looks_like_contains_artifact_refs",
    "match_artifact_expression",
    "new_artifact_refs",
    "parse_artifact_expression",
    "parse_artifact_name",
    "pipeline_task_artifact_refs",
    "validate_artifact_name",
    "validate_artifacts",
]
