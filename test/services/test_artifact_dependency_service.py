import json
import os
import shutil
from unittest.mock import MagicMock

import pytest
from pipeline_artifacts.models import ArtifactConfig, ArtifactType
from pipeline_artifacts.models.v1beta1 import Param, Pipeline, PipelineTask
from pipeline_artifacts.services.artifact_dependency_service import ArtifactDependencyService

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def pipelines_file(tmp_path):
    source_file = os.path.join(ASSETS_DIR, "pipelines.yaml")
    dest_file = tmp_path / "pipelines.yaml"
    shutil.copy(source_file, dest_file)
    return dest_file


@pytest.fixture
def service(pipelines_file):
    config = ArtifactConfig(types=[ArtifactType(type="sbom", task_ref="sbom-generator")])
    svc = ArtifactDependencyService(str(pipelines_file), config)
    svc.logger = MagicMock()
    return svc


def test_resolve_pipeline(service):
    pipeline = service.pipelines_repo.find_all()[0]
    resolved = service.resolve_pipeline(pipeline)

    assert resolved == {
        "build": {"depends_on": [], "providers": {}},
        "scan": {"depends_on": ["build"], "providers": {"report-input": "sbom-generator"}},
        "publish": {"depends_on": ["build"], "providers": {}},
        "notify": {"depends_on": ["scan"], "providers": {}},
    }


def test_unknown_producer_is_logged_and_skipped(service):
    pipeline = service.pipelines_repo.find_all()[0]
    service.resolve_pipeline(pipeline)
    assert any(
        "unknown task missing" in str(args)
        for args, _ in service.logger.warning.call_args_list
    )


def test_producing_tasks_deduplicates_in_reference_order(service):
    task = PipelineTask(
        name="consumer",
        params=[
            Param(name="a", value="$(tasks.second.artifacts.outputs.x)"),
            Param(name="b", value="$(tasks.first.artifacts.outputs.y)"),
            Param(name="c", value="$(tasks.second.artifacts.outputs.z)"),
        ],
    )
    assert service.producing_tasks(task, {"first", "second"}) == ["second", "first"]


def test_run_prints_report(service, capsys):
    service.run()
    report = json.loads(capsys.readouterr().out)
    assert list(report) == ["release"]
    assert report["release"]["scan"]["depends_on"] == ["build"]


def test_run_without_pipelines(tmp_path):
    svc = ArtifactDependencyService(str(tmp_path / "missing.yaml"))
    svc.logger = MagicMock()
    svc.run()
    svc.logger.info.assert_called_with("No pipelines found")


def test_default_config_has_no_providers(pipelines_file):
    svc = ArtifactDependencyService(str(pipelines_file))
    pipeline = Pipeline(name="p", tasks=svc.pipelines_repo.find_all()[0].tasks)
    svc.logger = MagicMock()
    assert svc.resolve_pipeline(pipeline)["scan"]["providers"] == {}
