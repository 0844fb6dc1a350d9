import json
import logging
from typing import Any, Callable

from typing_extensions import override

from pipeline_artifacts.conversion import convert_artifacts_from, convert_artifacts_to
from pipeline_artifacts.models import v1, v1beta1
from pipeline_artifacts.repositories import PipelineRepository
from pipeline_artifacts.repositories.serialization import artifacts_to_data
from pipeline_artifacts.resolution import validate_artifacts
from pipeline_artifacts.services.service import Service
from pipeline_artifacts.utils.logging import setup_logger

API_VERSION_KEY = "api_version"


class ArtifactMigrationService(Service):
    def __init__(self, pipelines_file_path: str, output_file_path: str, target_version: str = "v1", dry_run: bool = False):
        self.repo: PipelineRepository = PipelineRepository(pipelines_file_path)
        self.output_file_path: str = output_file_path
        self.target_version: str = target_version
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("ArtifactMigrationService")

    def get_conversion(self) -> tuple[type, Callable[[Any], Any]]:
        match self.target_version:
            case "v1":
                return v1beta1.Artifacts, convert_artifacts_to
            case "v1beta1":
                return v1.Artifacts, convert_artifacts_from
            case _:
                raise Exception(f"Unsupported target version: {self.target_version}")

    @override
    def run(self) -> None:
        source_type, convert = self.get_conversion()
        document = self.repo.load_document()
        if not document:
            self.logger.info("No pipelines document found")
            return

        converted = 0
        for pipeline in document.get("pipelines") or []:
            for task in [*(pipeline.get("tasks") or []), *(pipeline.get("finally") or [])]:
                if not task.get("artifacts"):
                    continue
                task["artifacts"] = self.migrate_artifacts(task["artifacts"], source_type, convert)
                converted += 1
        document[API_VERSION_KEY] = self.target_version
        self.logger.info(f"Converted artifacts of {converted} tasks to {self.target_version}")

        if self.dry_run:
            print(json.dumps(document, indent=2))
            return
        self.repo.save_document(document, self.output_file_path)
        self.logger.info(f"Pipelines written to {self.output_file_path}")

    def migrate_artifacts(self, raw: Any, source_type: type, convert: Callable[[Any], Any]) -> dict[str, Any]:
        try:
            source = source_type(**raw)
        except Exception as e:
            raise ValueError(f"Invalid artifacts block: {e}") from e
        validate_artifacts(source)
        return artifacts_to_data(convert(source))
