# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import Field, field_validator

from .base import FrozenModel, not_blank
from .coverage import TestCoverage


class Trigger(str, Enum):
    never = "never"
    eachCommit = "eachCommit"
    daily = "daily"
    weekly = "weekly"


class SpecificBuild(str, Enum):
    SanityCheck = "SanityCheck"
    BuildDistributions = "BuildDistributions"
    Gradleception = "Gradleception"
    SmokeTests = "SmokeTests"


class Stage(FrozenModel):
    """
    One pipeline stage: what starts it and which checks it runs, in order.
    """
    name: str
    description: str
    trigger: Trigger = Field(default=Trigger.never)
    specific_builds: Tuple[SpecificBuild, ...] = ()
    functional_tests: Tuple[TestCoverage, ...] = ()
    functional_tests_depend_on_specific_builds: bool = False
    runs_independent: bool = False

    @field_validator("name", "description")
    @classmethod
    def _not_empty(cls, v: str, info) -> str:
        return not_blank(v, f"Stage {info.field_name}")

    @field_validator("functional_tests")
    @classmethod
    def _distinct_coverage(cls, v: Tuple[TestCoverage, ...]) -> Tuple[TestCoverage, ...]:
        if len(set(v)) != len(v):
            raise ValueError("Stage lists the same test coverage more than once")
        return v

    @property
    def id(self) -> str:
        return self.name.replace(" ", "").replace("-", "")
