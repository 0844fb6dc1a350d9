import json
import os

import artifact_dependencies
import artifact_migration

ASSETS_DIR = os.path.join(os.path.dirname(__file__), "assets")


def test_dependencies_uses_configured_config_map(monkeypatch, capsys):
    monkeypatch.setenv("PIPELINES_FILE", os.path.join(ASSETS_DIR, "pipelines.yaml"))
    monkeypatch.setenv("ARTIFACT_CONFIG_FILE", os.path.join(ASSETS_DIR, "artifact-config.yaml"))
    monkeypatch.setenv("ARTIFACT_CONFIG", "artifact-config")
    assert artifact_dependencies.main() == 0
    out = capsys.readouterr().out
    report = json.loads(out[out.index("{"):out.rindex("}") + 1])
    assert report["release"]["scan"]["providers"] == {"report-input": "sbom-generator"}


def test_dependencies_failure_returns_one(monkeypatch, tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("pipelines:\n  - tasks: []\n")
    monkeypatch.setenv("PIPELINES_FILE", str(bad_file))
    monkeypatch.setenv("ARTIFACT_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    assert artifact_dependencies.main() == 1


def test_migration_writes_output_file(monkeypatch, tmp_path):
    output = tmp_path / "out.yaml"
    monkeypatch.setenv("PIPELINES_FILE", os.path.join(ASSETS_DIR, "pipelines.yaml"))
    monkeypatch.setenv("OUTPUT_FILE", str(output))
    assert artifact_migration.main(["--target", "v1"]) == 0
    assert output.exists()
