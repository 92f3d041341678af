# tests/test_cli.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from ci_model import cli
from ci_model.config import Settings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    # keep a developer's .env and TEAMCITY_* variables out of the tests
    monkeypatch.chdir(tmp_path)
    for key in ("SETTINGS_DIR", "TEAMCITY_SETTINGS_DIR", "DSL_VERSION",
                "TEAMCITY_DSL_VERSION", "OVERWRITE_SETTINGS", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults():
    cfg = Settings()
    assert cfg.SETTINGS_DIR == Path.cwd() / "build" / "teamcity"
    assert cfg.DSL_VERSION == "2017.2"
    assert cfg.OVERWRITE_SETTINGS is False
    assert cfg.LOG_LEVEL == "INFO"


def test_settings_teamcity_aliases(monkeypatch, tmp_path):
    monkeypatch.setenv("TEAMCITY_DSL_VERSION", "2018.1")
    monkeypatch.setenv("TEAMCITY_SETTINGS_DIR", str(tmp_path / "tc"))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = Settings()
    assert cfg.DSL_VERSION == "2018.1"
    assert cfg.SETTINGS_DIR == tmp_path / "tc"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_export_writes_settings(tmp_path, capsys):
    assert cli.main(["--out-dir", str(tmp_path / "out")]) == cli.EXIT_OK
    out = capsys.readouterr().out
    path = tmp_path / "out" / "Gradle_BuildCachePreemptive" / "settings.json"
    assert f"Wrote {path}" in out
    assert "%gradle.cache.parent.url%" in out
    assert json.loads(path.read_text(encoding="utf-8"))["version"] == "2017.2"


def test_export_uses_settings_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SETTINGS_DIR", str(tmp_path / "env-out"))
    assert cli.main([]) == cli.EXIT_OK
    assert (tmp_path / "env-out" / "Gradle_BuildCachePreemptive" / "settings.json").exists()


def test_second_export_needs_overwrite(tmp_path):
    args = ["--out-dir", str(tmp_path)]
    assert cli.main(args) == cli.EXIT_OK
    assert cli.main(args) == cli.EXIT_ALREADY_REGISTERED
    assert cli.main(args + ["--overwrite"]) == cli.EXIT_OK


def test_print_only(tmp_path, capsys):
    assert cli.main(["--print", "--out-dir", str(tmp_path / "unused")]) == cli.EXIT_OK
    doc = json.loads(capsys.readouterr().out)
    assert doc["name"] == "Build Cache Preemptive"
    assert not (tmp_path / "unused").exists()


def test_unwritable_out_dir_returns_error_code(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    assert cli.main(["--out-dir", str(blocker)]) == cli.EXIT_WRITE_FAILED
    assert blocker.read_text(encoding="utf-8") == "not a directory"
