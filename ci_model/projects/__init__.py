# SPDX-License-Identifier: Apache-2.0
"""
Project settings scripts. Each module exposes `build()` returning the
project's CIBuildModel and `register(registrar)` handing it to a registrar.
"""
from __future__ import annotations

from . import build_cache_preemptive

PROJECTS = {
    "Gradle_BuildCachePreemptive": build_cache_preemptive,
}

__all__ = ["PROJECTS", "build_cache_preemptive"]
