# SPDX-License-Identifier: Apache-2.0
"""
Settings for the "Build Cache Preemptive" TeamCity project.

A single quick-feedback stage on Linux, run on every commit, against the
parent/child remote build caches. The %...% values are TeamCity parameters
resolved by the server.
"""
from __future__ import annotations

from ..models import (
    OS,
    CIBuildModel,
    JvmVersion,
    RemoteBuildCache,
    SpecificBuild,
    Stage,
    TestCoverage,
    TestType,
    Trigger,
)
from ..services.registry import ProjectRegistrar


def build() -> CIBuildModel:
    parent_cache = RemoteBuildCache(
        url="%gradle.cache.parent.url%",
        username="%gradle.cache.parent.username%",
        password="%gradle.cache.parent.password%",
    )
    child_cache = RemoteBuildCache(
        url="%gradle.cache.child.url%",
        username="%gradle.cache.child.username%",
        password="%gradle.cache.child.password%",
    )
    quick_feedback = Stage(
        name="Quick Feedback - Linux Only",
        description="Run checks and functional tests (embedded executer)",
        trigger=Trigger.eachCommit,
        specific_builds=[SpecificBuild.SanityCheck],
        functional_tests=[
            TestCoverage(test_type=TestType.quick, os=OS.linux, jvm_version=JvmVersion.java8),
        ],
    )
    return CIBuildModel(
        project_prefix="Gradle_BuildCachePreemptive_",
        root_project_name="Build Cache Preemptive",
        master_and_release_branches=["master"],
        parent_build_cache=parent_cache,
        child_build_cache=child_cache,
        tag_builds=False,
        publish_status_to_github=False,
        build_scan_tags=["BuildCachePreemptive"],
        stages=[quick_feedback],
    )


def register(registrar: ProjectRegistrar) -> CIBuildModel:
    config = build()
    registrar.register_project(config)
    return config
