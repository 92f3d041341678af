# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

# Re-export commonly used models for convenience
from .cache import RemoteBuildCache
from .coverage import OS, JvmVersion, TestCoverage, TestType
from .stage import SpecificBuild, Stage, Trigger
from .build_model import CIBuildModel
from .project import DEFAULT_DSL_VERSION, RootProject

__all__ = [
    "RemoteBuildCache",
    "OS",
    "JvmVersion",
    "TestCoverage",
    "TestType",
    "SpecificBuild",
    "Stage",
    "Trigger",
    "CIBuildModel",
    "DEFAULT_DSL_VERSION",
    "RootProject",
]
