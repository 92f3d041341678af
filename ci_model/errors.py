# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations


class RegistrationError(Exception):
    """Base class for failures while handing a project to a registrar."""


class ProjectAlreadyRegisteredError(RegistrationError):
    def __init__(self, project_id: str, where: str | None = None):
        self.project_id = project_id
        self.where = where
        msg = f"Project {project_id!r} is already registered"
        if where:
            msg += f" ({where})"
        super().__init__(msg)


class SettingsFormatError(ValueError):
    """A settings document could not be parsed into a project."""
