from dataclasses import field

from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ArtifactType:
    type: str = ""
    task_ref: str = ""


@dataclass(frozen=True)
class ArtifactConfig:
    types: list[ArtifactType] = field(default_factory=list)

    def task_ref_for(self, artifact_type: str) -> str | None:
        return next((t.task_ref for t in self.types if t.type == artifact_type), None)
