from dataclasses import fields
from typing import Any


def task_ref_to_data(task_ref: Any) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for f in fields(task_ref):
        value = getattr(task_ref, f.name)
        if not value:
            continue
        if f.name == "params":
            data["params"] = [{"name": p.name, "value": p.value.to_raw()} for p in value]
        else:
            data[f.name] = value
    return data


def artifact_to_data(artifact: Any) -> dict[str, Any]:
    data: dict[str, Any] = {"name": artifact.name}
    if artifact.description:
        data["description"] = artifact.description
    data["value"] = artifact.value.to_raw()
    if artifact.task_ref is not None:
        data["task_ref"] = task_ref_to_data(artifact.task_ref)
    if artifact.type:
        data["type"] = artifact.type
    return data


def artifacts_to_data(artifacts: Any) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if artifacts.inputs:
        data["inputs"] = [artifact_to_data(a) for a in artifacts.inputs]
    if artifacts.outputs:
        data["outputs"] = [artifact_to_data(a) for a in artifacts.outputs]
    return data
