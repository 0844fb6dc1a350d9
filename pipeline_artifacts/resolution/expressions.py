import logging
import re
from collections.abc import Iterable

from pydantic.dataclasses import dataclass

from pipeline_artifacts.errors import InvalidArtifactExpressionError
from pipeline_artifacts.models import ArtifactRef

logger = logging.getLogger(__name__)

ARTIFACT_TASK_PART = "tasks"
ARTIFACT_FINALLY_PART = "finally"
ARTIFACT_ARTIFACT_PART = "artifacts"

ARTIFACT_EXPRESSION_FORMAT = "tasks.<taskName>.artifacts.<direction>.<artifactName>"
# <name>.<attribute> is an object access, dotted string names need brackets
OBJECT_ARTIFACT_EXPRESSION_FORMAT = "tasks.<taskName>.artifacts.<direction>.<objectArtifactName>.<individualAttribute>"

ALL_ELEMENTS_TOKEN = "*"

_array_indexing_regex = re.compile(r"\[([0-9]+|\*)\]\Z")


@dataclass(frozen=True)
class ArtifactExpression:
    pipeline_task: str
    artifact: str
    index: int = 0
    property: str = ""
    all_elements: bool = False

    def to_ref(self) -> ArtifactRef:
        return ArtifactRef(
            pipeline_task=self.pipeline_task,
            artifact=self.artifact,
            artifacts_index=self.index,
            property=self.property,
            all_elements=self.all_elements,
        )


def looks_like_artifact_ref(expression: str) -> bool:
    parts = expression.split(".")
    return (
        len(parts) >= 4
        and parts[0] in (ARTIFACT_TASK_PART, ARTIFACT_FINALLY_PART)
        and parts[2] == ARTIFACT_ARTIFACT_PART
    )


def looks_like_contains_artifact_refs(expressions: Iterable[str]) -> bool:
    return any(looks_like_artifact_ref(e) for e in expressions)


def parse_artifact_name(artifact_name: str) -> tuple[str, str]:
    match = _array_indexing_regex.search(artifact_name)
    if match is None:
        return artifact_name, ""
    return artifact_name[:match.start()], match.group(1)


def match_artifact_expression(expression: str) -> ArtifactExpression | None:
    if not looks_like_artifact_ref(expression):
        return None
    parts = expression.split(".")
    if len(parts) == 5:
        artifact, token = parse_artifact_name(parts[4])
        if token == ALL_ELEMENTS_TOKEN:
            logger.debug(f"Expression {expression} references every element of {artifact}")
            return ArtifactExpression(parts[1], artifact, all_elements=True)
        return ArtifactExpression(parts[1], artifact, index=int(token) if token else 0)
    if len(parts) == 6:
        return ArtifactExpression(parts[1], parts[4], property=parts[5])
    return None


def parse_artifact_expression(expression: str) -> ArtifactExpression:
    parsed = match_artifact_expression(expression)
    if parsed is None:
        raise InvalidArtifactExpressionError(
            f"Invalid artifact reference {expression!r}: must be one of the form "
            f"1). {ARTIFACT_EXPRESSION_FORMAT!r}; 2). {OBJECT_ARTIFACT_EXPRESSION_FORMAT!r}"
        )
    return parsed


def new_artifact_refs(expressions: Iterable[str]) -> list[ArtifactRef]:
    # misses may be other substitutions (params, results, context)
    refs: list[ArtifactRef] = []
    for expression in expressions:
        parsed = match_artifact_expression(expression)
        if parsed is not None:
            refs.append(parsed.to_ref())
    return refs
