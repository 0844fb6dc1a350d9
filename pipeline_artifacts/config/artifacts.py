import json
import logging
from collections.abc import Mapping

from pipeline_artifacts.models import ArtifactConfig, ArtifactType

logger = logging.getLogger(__name__)

ARTIFACT_CONFIG_ENV = "ARTIFACT_CONFIG"
DEFAULT_ARTIFACT_CONFIG_NAME = "artifact-config"
ARTIFACT_TYPES_KEY = "type"
ARTIFACT_TYPE_LIST_KEY = "artifact-type"


def resolve_artifact_config_name(environ: Mapping[str, str]) -> str:
    return environ.get(ARTIFACT_CONFIG_ENV) or DEFAULT_ARTIFACT_CONFIG_NAME


def new_artifact_config_from_map(cfg_map: Mapping[str, str]) -> ArtifactConfig:
    raw = cfg_map.get(ARTIFACT_TYPES_KEY)
    if raw is None:
        logger.debug(f"No {ARTIFACT_TYPES_KEY!r} key in artifact config, using empty config")
        return ArtifactConfig()
    value = json.loads(raw)
    if not isinstance(value, dict):
        raise ValueError(f"Artifact config {ARTIFACT_TYPES_KEY!r} must be a JSON object, got {type(value).__name__}")
    types = []
    for entry in value.get(ARTIFACT_TYPE_LIST_KEY) or []:
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid artifact type entry: {entry!r}")
        types.append(ArtifactType(type=entry.get("type", ""), task_ref=entry.get("taskRef", "")))
    logger.debug(f"Loaded {len(types)} artifact types")
    return ArtifactConfig(types=types)
