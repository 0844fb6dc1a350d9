from .param import Param, ParamType, ParamValue
from .task_ref import TaskRef
from .artifact import Artifact, Artifacts
from .pipeline import IncludeParams, Matrix, Pipeline, PipelineTask, WhenExpression

__all__ = [
    "Artifact",
    "Artifacts",
    "IncludeParams",
    "Matrix",
    "Param",
    "ParamType",
    "ParamValue",
    "Pipeline",
    "PipelineTask",
    "TaskRef",
    "WhenExpression",
]
