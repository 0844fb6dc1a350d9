import json
import logging
from typing import Any

from typing_extensions import override

from pipeline_artifacts.models import ArtifactConfig
from pipeline_artifacts.models.v1beta1 import Pipeline, PipelineTask
from pipeline_artifacts.repositories import PipelineRepository
from pipeline_artifacts.resolution import pipeline_task_artifact_refs
from pipeline_artifacts.services.service import Service
from pipeline_artifacts.utils.logging import setup_logger


class ArtifactDependencyService(Service):
    def __init__(self, pipelines_file_path: str, artifact_config: ArtifactConfig | None = None):
        self.pipelines_repo: PipelineRepository = PipelineRepository(pipelines_file_path)
        self.artifact_config: ArtifactConfig = artifact_config or ArtifactConfig()
        self.logger: logging.Logger = setup_logger("ArtifactDependencyService")

    @override
    def run(self) -> None:
        pipelines = self.pipelines_repo.find_all()
        if not pipelines:
            self.logger.info("No pipelines found")
            return
        report = {p.name: self.resolve_pipeline(p) for p in pipelines}
        print(json.dumps(report, indent=2))

    def resolve_pipeline(self, pipeline: Pipeline) -> dict[str, dict[str, Any]]:
        known_tasks = {t.name for t in pipeline.all_tasks()}
        resolved = {}
        for task in pipeline.all_tasks():
            resolved[task.name] = {
                "depends_on": self.producing_tasks(task, known_tasks),
                "providers": self.input_providers(task),
            }
        return resolved

    def producing_tasks(self, task: PipelineTask, known_tasks: set[str]) -> list[str]:
        producers: list[str] = []
        for ref in pipeline_task_artifact_refs(task):
            if ref.pipeline_task not in known_tasks:
                self.logger.warning(
                    f"Task {task.name} references artifact {ref.artifact} of unknown task {ref.pipeline_task}"
                )
                continue
            if ref.pipeline_task not in producers:
                producers.append(ref.pipeline_task)
        return producers

    def input_providers(self, task: PipelineTask) -> dict[str, str]:
        providers: dict[str, str] = {}
        if task.artifacts is None:
            return providers
        for artifact in task.artifacts.inputs:
            if not artifact.type:
                continue
            task_ref = self.artifact_config.task_ref_for(artifact.type)
            if task_ref:
                providers[artifact.name] = task_ref
            else:
                self.logger.info(f"No provider configured for artifact type {artifact.type} of {task.name}/{artifact.name}")
        return providers
