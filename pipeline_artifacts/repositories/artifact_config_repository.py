import os

from ruamel.yaml import YAML
from pipeline_artifacts.config.artifacts import new_artifact_config_from_map
from pipeline_artifacts.models import ArtifactConfig, ConfigMap
from pipeline_artifacts.utils.yaml_loader import get_yaml_instance


class ArtifactConfigRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[ConfigMap]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            documents = [d for d in self.yaml.load_all(f) if d]
            try:
                return [
                    ConfigMap(name=d["metadata"]["name"], data=dict(d.get("data") or {}))
                    for d in documents
                    if d.get("kind", "ConfigMap") == "ConfigMap"
                ]
            except Exception as e:
                raise ValueError(f"Invalid config map file structure: {e}") from e

    def find_by_name(self, name: str) -> ArtifactConfig:
        config_map = next((c for c in self.find_all() if c.name == name), None)
        if config_map is None:
            return ArtifactConfig()
        return new_artifact_config_from_map(config_map.data)
