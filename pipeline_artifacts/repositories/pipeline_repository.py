import os
from typing import Any

from ruamel.yaml import YAML
from pipeline_artifacts.models import PipelinesFile
from pipeline_artifacts.models.v1beta1 import Pipeline
from pipeline_artifacts.utils.yaml_loader import get_yaml_instance


class PipelineRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[Pipeline]:
        data = self.load_document()
        if data is None:
            return []
        try:
            parsed = PipelinesFile(pipelines=[self._normalize_pipeline(p) for p in data.get("pipelines") or []])
            return parsed.pipelines
        except Exception as e:
            raise ValueError(f"Invalid pipelines file: {e}") from e

    def find_by_name(self, name: str) -> Pipeline | None:
        return next((p for p in self.find_all() if p.name == name), None)

    def load_document(self) -> Any:
        if not os.path.isfile(self.file_path):
            return None
        with open(self.file_path, "r") as f:
            return self.yaml.load(f)

    def save_document(self, data: Any, file_path: str | None = None) -> bool:
        target = file_path or self.file_path
        try:
            with open(target, "w") as f:
                self.yaml.dump(data, f)
            return True
        except Exception as e:
            raise Exception(f"Error writing pipelines: {e}") from e

    @staticmethod
    def _normalize_pipeline(raw: Any) -> dict[str, Any]:
        # "finally" is a keyword, the model keeps those tasks in finally_tasks
        pipeline = dict(raw)
        if "finally" in pipeline:
            pipeline["finally_tasks"] = pipeline.pop("finally")
        return pipeline
