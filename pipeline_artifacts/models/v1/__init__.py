from .param import Param, ParamType, ParamValue
from .task_ref import TaskRef
from .artifact import Artifact, Artifacts

__all__ = [
    "Artifact",
    "Artifacts",
    "Param",
    "ParamType",
    "ParamValue",
    "TaskRef",
]
