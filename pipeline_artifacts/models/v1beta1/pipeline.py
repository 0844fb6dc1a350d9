from dataclasses import field

from pydantic.dataclasses import dataclass

from .artifact import Artifacts
from .param import Param
from .task_ref import TaskRef


@dataclass(frozen=True)
class WhenExpression:
    input: str
    operator: str = "in"
    values: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class IncludeParams:
    name: str = ""
    params: list[Param] = field(default_factory=list)


@dataclass(frozen=True)
class Matrix:
    params: list[Param] = field(default_factory=list)
    include: list[IncludeParams] = field(default_factory=list)


@dataclass(frozen=True)
class PipelineTask:
    name: str
    task_ref: TaskRef | None = None
    params: list[Param] = field(default_factory=list)
    when: list[WhenExpression] = field(default_factory=list)
    matrix: Matrix | None = None
    artifacts: Artifacts | None = None
    run_after: list[str] = field(default_factory=list)

    def all_params(self) -> list[Param]:
        params = list(self.params)
        if self.matrix is not None:
            params.extend(self.matrix.params)
            for include in self.matrix.include:
                params.extend(include.params)
        return params


@dataclass(frozen=True)
class Pipeline:
    name: str
    tasks: list[PipelineTask] = field(default_factory=list)
    finally_tasks: list[PipelineTask] = field(default_factory=list)

    def all_tasks(self) -> list[PipelineTask]:
        return [*self.tasks, *self.finally_tasks]
