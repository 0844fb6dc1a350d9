#!/usr/bin/env python3
import argparse
import os
import sys
from pipeline_artifacts.services.artifact_migration_service import ArtifactMigrationService
from pipeline_artifacts.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Artifact Schema Migration")
    parser.add_argument('--target', choices=["v1", "v1beta1"], default="v1", help='Schema version to convert artifacts to')
    parser.add_argument('--dry-run', action='store_true', help='Print the converted pipelines instead of writing them')
    args = parser.parse_args(argv)
    logger = setup_logger("ArtifactMigration")
    try:
        pipelines_file = os.environ.get("PIPELINES_FILE", f"{ROOT_DIR}/pipelines.yaml")
        output_file = os.environ.get("OUTPUT_FILE", pipelines_file)
        logger.info(f"Starting artifact migration of {pipelines_file} to {args.target}")
        service = ArtifactMigrationService(pipelines_file, output_file, args.target, args.dry_run)
        service.run()
        logger.info("Artifact migration completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Artifact migration failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
