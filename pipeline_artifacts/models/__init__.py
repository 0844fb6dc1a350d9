from .artifact_ref import ArtifactRef
from .artifact_config import ArtifactConfig, ArtifactType
from .config_map import ConfigMap
from .raw_value import ParamType
from .wrappers import PipelinesFile

__all__ = [
    "ArtifactConfig",
    "ArtifactRef",
    "ArtifactType",
    "ConfigMap",
    "ParamType",
    "PipelinesFile",
]
