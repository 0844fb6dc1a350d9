#!/usr/bin/env python3
import os
import sys
from pipeline_artifacts.config.artifacts import resolve_artifact_config_name
from pipeline_artifacts.repositories import ArtifactConfigRepository
from pipeline_artifacts.services.artifact_dependency_service import ArtifactDependencyService
from pipeline_artifacts.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    logger = setup_logger("ArtifactDependencies")

    try:
        pipelines_file = os.environ.get("PIPELINES_FILE", f"{ROOT_DIR}/pipelines.yaml")
        config_file = os.environ.get("ARTIFACT_CONFIG_FILE", f"{ROOT_DIR}/artifact-config.yaml")
        config_name = resolve_artifact_config_name(os.environ)
        logger.info(f"Loading artifact config {config_name} from {config_file}")
        artifact_config = ArtifactConfigRepository(config_file).find_by_name(config_name)
        logger.info(f"Resolving artifact dependencies of pipelines file: {pipelines_file}")
        service = ArtifactDependencyService(pipelines_file, artifact_config)
        service.run()
        logger.info("Artifact dependency resolution completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Artifact dependency resolution failed: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())
