# SPDX-License-Identifier: Apache-2.0
"""
Project registration.

A settings script builds a CIBuildModel and hands it, once, to whatever
registrar the host supplies. Registration is write-once per project id.

- InMemoryRegistrar: keeps registered projects in process (tests, tooling).
- SettingsFileRegistrar: writes <dir>/<project id>/settings.json for the host.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol, runtime_checkable

from ..errors import ProjectAlreadyRegisteredError
from ..models.build_model import CIBuildModel
from ..models.project import DEFAULT_DSL_VERSION, RootProject
from ..utils.fs import atomic_write_text, safe_filename
from .settings_io import project_to_json

log = logging.getLogger("ci_model.services.registry")

SETTINGS_FILENAME = "settings.json"


@runtime_checkable
class ProjectRegistrar(Protocol):
    def register_project(self, config: CIBuildModel) -> None:
        ...


class InMemoryRegistrar:
    def __init__(self, dsl_version: str = DEFAULT_DSL_VERSION):
        self.dsl_version = dsl_version
        self._projects: Dict[str, RootProject] = {}

    def register_project(self, config: CIBuildModel) -> None:
        project = RootProject(model=config, dsl_version=self.dsl_version)
        if project.project_id in self._projects:
            log.warning("Refusing second registration of %s", project.project_id)
            raise ProjectAlreadyRegisteredError(project.project_id)
        self._projects[project.project_id] = project
        log.info(
            "Registered project %s (%d stage(s))",
            project.project_id,
            len(config.stages),
        )

    def get(self, project_id: str) -> RootProject:
        return self._projects[project_id]

    def projects(self) -> List[RootProject]:
        return list(self._projects.values())


class SettingsFileRegistrar:
    """
    Writes each registered project as a JSON settings document.

    An existing settings file counts as a previous registration unless
    `overwrite` is set.
    """

    def __init__(
        self,
        output_dir: Path | str,
        dsl_version: str = DEFAULT_DSL_VERSION,
        overwrite: bool = False,
    ):
        self.output_dir = Path(output_dir)
        self.dsl_version = dsl_version
        self.overwrite = overwrite
        self.written: Optional[Path] = None

    def path_for(self, project: RootProject) -> Path:
        return self.output_dir / safe_filename(project.project_id) / SETTINGS_FILENAME

    def register_project(self, config: CIBuildModel) -> None:
        project = RootProject(model=config, dsl_version=self.dsl_version)
        target = self.path_for(project)
        if target.exists() and not self.overwrite:
            log.warning("Settings for %s already exist at %s", project.project_id, target)
            raise ProjectAlreadyRegisteredError(project.project_id, where=str(target))

        atomic_write_text(target, project_to_json(project) + "\n")
        log.debug("Wrote %s", target)
        self.written = target
        log.info("Registered project %s -> %s", project.project_id, target)
