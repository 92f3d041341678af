# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import List

from pydantic import Field, field_validator

from .base import FrozenModel, not_blank
from .build_model import CIBuildModel

DEFAULT_DSL_VERSION = "2017.2"


class RootProject(FrozenModel):
    """
    A build model bound to the TeamCity DSL version it targets.
    """
    model: CIBuildModel
    dsl_version: str = Field(default=DEFAULT_DSL_VERSION, alias="version")

    @field_validator("dsl_version")
    @classmethod
    def _version_not_empty(cls, v: str) -> str:
        return not_blank(v, "DSL version")

    @property
    def project_id(self) -> str:
        return self.model.project_prefix.rstrip("_")

    @property
    def name(self) -> str:
        return self.model.root_project_name

    def build_type_ids(self) -> List[str]:
        prefix = self.model.project_prefix
        ids: List[str] = []
        for stage in self.model.stages:
            ids.append(f"{prefix}Stage_{stage.id}_Trigger")
            ids.extend(f"{prefix}{b.value}" for b in stage.specific_builds)
            ids.extend(cov.as_id(self.model) for cov in stage.functional_tests)
        # a specific build shared by two stages is still one build type
        return list(dict.fromkeys(ids))
