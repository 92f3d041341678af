# tests/test_build_cache_preemptive.py
from __future__ import annotations

from ci_model.models import OS, JvmVersion, RootProject, SpecificBuild, TestType, Trigger
from ci_model.projects import PROJECTS, build_cache_preemptive
from ci_model.services.registry import InMemoryRegistrar


def test_literal_settings():
    cfg = build_cache_preemptive.build()
    assert cfg.project_prefix == "Gradle_BuildCachePreemptive_"
    assert cfg.root_project_name == "Build Cache Preemptive"
    assert cfg.master_and_release_branches == ("master",)
    assert cfg.tag_builds is False
    assert cfg.publish_status_to_github is False
    assert set(cfg.build_scan_tags) == {"BuildCachePreemptive"}


def test_caches_reference_host_parameters():
    cfg = build_cache_preemptive.build()
    assert cfg.parent_build_cache.url == "%gradle.cache.parent.url%"
    assert cfg.parent_build_cache.username == "%gradle.cache.parent.username%"
    assert cfg.parent_build_cache.password == "%gradle.cache.parent.password%"
    assert cfg.child_build_cache.url == "%gradle.cache.child.url%"
    assert cfg.child_build_cache.username == "%gradle.cache.child.username%"
    assert cfg.child_build_cache.password == "%gradle.cache.child.password%"


def test_single_quick_feedback_stage():
    cfg = build_cache_preemptive.build()
    assert len(cfg.stages) == 1
    stage = cfg.stages[0]
    assert stage.name == "Quick Feedback - Linux Only"
    assert stage.description == "Run checks and functional tests (embedded executer)"
    assert stage.trigger == Trigger.eachCommit
    assert list(stage.specific_builds) == [SpecificBuild.SanityCheck]
    assert len(stage.functional_tests) == 1
    cov = stage.functional_tests[0]
    assert (cov.test_type, cov.os, cov.jvm_version) == (TestType.quick, OS.linux, JvmVersion.java8)


def test_build_is_deterministic():
    assert build_cache_preemptive.build() == build_cache_preemptive.build()


def test_build_type_ids():
    project = RootProject(model=build_cache_preemptive.build())
    assert project.project_id == "Gradle_BuildCachePreemptive"
    assert project.name == "Build Cache Preemptive"
    assert project.dsl_version == "2017.2"
    assert project.build_type_ids() == [
        "Gradle_BuildCachePreemptive_Stage_QuickFeedbackLinuxOnly_Trigger",
        "Gradle_BuildCachePreemptive_SanityCheck",
        "Gradle_BuildCachePreemptive_Quick_Java8_Linux",
    ]


def test_register_hands_model_to_registrar_once():
    registrar = InMemoryRegistrar()
    cfg = build_cache_preemptive.register(registrar)
    [project] = registrar.projects()
    assert project.model == cfg
    assert registrar.get("Gradle_BuildCachePreemptive").model == build_cache_preemptive.build()


def test_project_is_listed():
    assert PROJECTS["Gradle_BuildCachePreemptive"] is build_cache_preemptive
