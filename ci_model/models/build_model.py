# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Tuple

from pydantic import Field, field_validator, model_validator

from .base import FrozenModel, not_blank, unique_strings
from .cache import RemoteBuildCache
from .stage import Stage


def _default_cache() -> RemoteBuildCache:
    return RemoteBuildCache(url="%gradle.cache.remote.url%")


class CIBuildModel(FrozenModel):
    """
    Aggregate root of a TeamCity project's build model.

    Built once, bottom-up, and handed to a project registrar. `stages` order
    is execution and display order. Branch and tag collections behave as sets
    but keep first-seen order so serialized output is stable.
    """
    project_prefix: str = "Gradle_Check_"
    root_project_name: str = "Check"
    master_and_release_branches: Tuple[str, ...] = ("master", "release")
    parent_build_cache: RemoteBuildCache = Field(default_factory=_default_cache)
    child_build_cache: RemoteBuildCache = Field(default_factory=_default_cache)
    tag_builds: bool = True
    publish_status_to_github: bool = Field(default=True, alias="publishStatusToGitHub")
    build_scan_tags: Tuple[str, ...] = ()
    stages: Tuple[Stage, ...]

    @field_validator("project_prefix", "root_project_name")
    @classmethod
    def _not_empty(cls, v: str, info) -> str:
        return not_blank(v, info.field_name)

    @field_validator("master_and_release_branches", "build_scan_tags", mode="before")
    @classmethod
    def _as_set(cls, v, info):
        return unique_strings(v, info.field_name)

    @model_validator(mode="after")
    def _stages_check(self):
        if not self.stages:
            raise ValueError("A build model needs at least one stage")
        ids = [s.id for s in self.stages]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"Duplicate stage ids: {', '.join(dupes)}")
        return self

    def stage(self, stage_id: str) -> Stage:
        for s in self.stages:
            if s.id == stage_id:
                return s
        raise KeyError(stage_id)
