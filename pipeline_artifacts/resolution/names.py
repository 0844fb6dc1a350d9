import re

from pipeline_artifacts.errors import InvalidArtifactNameError

ARTIFACT_NAME_FORMAT = r"^([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]\Z"

_artifact_name_regex = re.compile(ARTIFACT_NAME_FORMAT)


def is_valid_artifact_name(name: str) -> bool:
    return _artifact_name_regex.fullmatch(name) is not None


def validate_artifact_name(name: str) -> None:
    if not is_valid_artifact_name(name):
        raise InvalidArtifactNameError(
            f"Invalid artifact name {name!r}: must consist of alphanumeric characters, "
            f"'-', '_' or '.', and must start and end with an alphanumeric character "
            f"(regex used for validation is {ARTIFACT_NAME_FORMAT!r})"
        )


def validate_artifacts(artifacts) -> None:
    for artifact in [*artifacts.inputs, *artifacts.outputs]:
        validate_artifact_name(artifact.name)
