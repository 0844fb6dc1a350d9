from pydantic.dataclasses import dataclass

from pipeline_artifacts.models.v1beta1 import Pipeline

@dataclass(frozen=True)
class PipelinesFile:
    pipelines: list[Pipeline]
