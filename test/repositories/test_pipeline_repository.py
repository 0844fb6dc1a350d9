import os
import shutil

import pytest
from pipeline_artifacts.models import ParamType
from pipeline_artifacts.repositories import PipelineRepository
from pipeline_artifacts.repositories.serialization import artifacts_to_data
from pipeline_artifacts.models.v1beta1 import Artifact, Artifacts, Param, TaskRef

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def pipelines_file(tmp_path):
    source_file = os.path.join(ASSETS_DIR, "pipelines.yaml")
    dest_file = tmp_path / "pipelines.yaml"
    shutil.copy(source_file, dest_file)
    return dest_file


def test_find_all_file_not_exists():
    assert PipelineRepository("notexistingfile").find_all() == []


def test_find_all(pipelines_file):
    pipelines = PipelineRepository(str(pipelines_file)).find_all()
    assert len(pipelines) == 1
    pipeline = pipelines[0]
    assert pipeline.name == "release"
    assert [t.name for t in pipeline.tasks] == ["build", "scan", "publish"]
    assert [t.name for t in pipeline.finally_tasks] == ["notify"]

    build = pipeline.tasks[0]
    assert build.task_ref.name == "build-image"
    outputs = build.artifacts.outputs
    assert [a.name for a in outputs] == ["sbom", "images", "meta"]
    assert outputs[0].value.type == ParamType.STRING
    assert outputs[0].description == "Software bill of materials"
    assert outputs[1].value.array_val == ["quay.io/example/app:amd64", "quay.io/example/app:arm64"]
    assert outputs[2].value.object_val == {"owner": "team-a", "digest": "sha256:abc"}

    scan = pipeline.tasks[1]
    assert scan.when[0].values == ["team-a"]
    assert scan.artifacts.inputs[0].task_ref.name == "sbom-reader"

    publish = pipeline.tasks[2]
    assert publish.run_after == ["scan"]
    assert publish.matrix.params[0].value.type == ParamType.ARRAY


def test_find_by_name(pipelines_file):
    repo = PipelineRepository(str(pipelines_file))
    assert repo.find_by_name("release") is not None
    assert repo.find_by_name("missing") is None


def test_invalid_pipelines_file(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("pipelines:\n  - tasks: []\n")
    with pytest.raises(ValueError, match="Invalid pipelines file"):
        PipelineRepository(str(bad_file)).find_all()


def test_save_document_round_trip(pipelines_file, tmp_path):
    repo = PipelineRepository(str(pipelines_file))
    document = repo.load_document()
    document["api_version"] = "v1"
    target = tmp_path / "out.yaml"
    assert repo.save_document(document, str(target))
    assert PipelineRepository(str(target)).load_document()["api_version"] == "v1"


def test_artifacts_to_data():
    artifacts = Artifacts(
        inputs=[Artifact(name="in", value={"k": "v"}, task_ref=TaskRef(name="t", params=[Param(name="p", value=["x"])]))],
        outputs=[Artifact(name="out", description="d", value="s", type="sbom")],
    )
    assert artifacts_to_data(artifacts) == {
        "inputs": [{"name": "in", "value": {"k": "v"}, "task_ref": {"name": "t", "params": [{"name": "p", "value": ["x"]}]}}],
        "outputs": [{"name": "out", "description": "d", "value": "s", "type": "sbom"}],
    }
    assert artifacts_to_data(Artifacts()) == {}
