# SPDX-License-Identifier: Apache-2.0
"""
Settings documents: the JSON form of a registered project.

Document shape:

    {
      "version": "2017.2",
      "projectId": "Gradle_BuildCachePreemptive",
      "name": "Build Cache Preemptive",
      "buildTypes": ["Gradle_BuildCachePreemptive_Stage_..._Trigger", ...],
      "model": { ...CIBuildModel, camelCase keys... }
    }

`projectId`, `name` and `buildTypes` are derived and ignored on load.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ValidationError

from ..errors import SettingsFormatError
from ..models.build_model import CIBuildModel
from ..models.cache import placeholder_names
from ..models.project import RootProject

log = logging.getLogger("ci_model.services.settings_io")


def model_to_dict(model: CIBuildModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def model_to_json(model: CIBuildModel, indent: int | None = 2) -> str:
    return json.dumps(model_to_dict(model), indent=indent, ensure_ascii=False)


def model_from_json(text: str) -> CIBuildModel:
    try:
        return CIBuildModel.model_validate_json(text)
    except ValidationError as e:
        raise SettingsFormatError(f"Invalid build model: {e}") from e


def dump_project(project: RootProject) -> Dict[str, Any]:
    return {
        "version": project.dsl_version,
        "projectId": project.project_id,
        "name": project.name,
        "buildTypes": project.build_type_ids(),
        "model": model_to_dict(project.model),
    }


def project_to_json(project: RootProject, indent: int | None = 2) -> str:
    return json.dumps(dump_project(project), indent=indent, ensure_ascii=False)


def project_from_json(text: str) -> RootProject:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsFormatError(f"Settings document is not valid JSON: {e}") from e
    if not isinstance(data, dict) or "model" not in data:
        raise SettingsFormatError("Settings document must be an object with a 'model' key")

    payload = {"model": data["model"]}
    if "version" in data:
        payload["version"] = data["version"]
    try:
        return RootProject.model_validate(payload)
    except ValidationError as e:
        raise SettingsFormatError(f"Invalid settings document: {e}") from e


def load_settings(path: Path | str) -> RootProject:
    p = Path(path)
    log.debug("Loading settings from %s", p)
    return project_from_json(p.read_text(encoding="utf-8"))


def placeholders(model: CIBuildModel) -> List[str]:
    """
    Host parameter names referenced as %name% anywhere in the model.
    These must be defined on the TeamCity server; nothing here resolves them.
    """
    found = set()
    for value in _strings(model):
        found.update(placeholder_names(value))
    return sorted(found)


def _strings(obj: Any):
    if isinstance(obj, BaseModel):
        for name in type(obj).model_fields:
            yield from _strings(getattr(obj, name))
    elif isinstance(obj, (list, tuple)):
        for item in obj:
            yield from _strings(item)
    elif isinstance(obj, str):
        yield obj
