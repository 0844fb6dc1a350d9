from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ArtifactRef:
    pipeline_task: str
    artifact: str
    artifacts_index: int = 0
    property: str = ""
    # set for a "[*]" reference to every element of an array artifact
    all_elements: bool = False
