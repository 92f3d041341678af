# SPDX-License-Identifier: Apache-2.0
"""
ci-model-export: build a project's settings and hand them to the host.

    ci-model-export                     # writes <SETTINGS_DIR>/<id>/settings.json
    ci-model-export --out-dir DIR --overwrite
    ci-model-export --print             # JSON document on stdout, nothing written
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Settings
from .errors import RegistrationError
from .models.project import RootProject
from .projects import PROJECTS
from .services.registry import SettingsFileRegistrar
from .services.settings_io import placeholders, project_to_json

log = logging.getLogger("ci_model.cli")

EXIT_OK = 0
EXIT_ALREADY_REGISTERED = 3
EXIT_WRITE_FAILED = 4


def _configure_logging(level: str | int) -> None:
    numeric = (
        level
        if isinstance(level, int)
        else getattr(logging, str(level).upper(), logging.INFO)
    )
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_parser(cfg: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ci-model-export",
        description="Export TeamCity project settings built from the CI build model",
    )
    ap.add_argument(
        "--project",
        choices=sorted(PROJECTS),
        default="Gradle_BuildCachePreemptive",
        help="Project settings to export (default: %(default)s)",
    )
    ap.add_argument("--out-dir", type=Path, default=cfg.SETTINGS_DIR)
    ap.add_argument("--overwrite", action="store_true", default=cfg.OVERWRITE_SETTINGS)
    ap.add_argument("--print", dest="print_only", action="store_true",
                    help="Print the settings document instead of writing it")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    cfg = Settings()  # pydantic-settings loads .env
    _configure_logging(cfg.LOG_LEVEL)
    a = _build_parser(cfg).parse_args(argv)

    script = PROJECTS[a.project]

    if a.print_only:
        project = RootProject(model=script.build(), dsl_version=cfg.DSL_VERSION)
        print(project_to_json(project))
        return EXIT_OK

    registrar = SettingsFileRegistrar(a.out_dir, dsl_version=cfg.DSL_VERSION, overwrite=a.overwrite)
    try:
        model = script.register(registrar)
    except RegistrationError as e:
        log.error("%s; pass --overwrite to replace it", e)
        return EXIT_ALREADY_REGISTERED
    except OSError as e:
        log.error("Could not write settings under %s: %s", a.out_dir, e)
        return EXIT_WRITE_FAILED

    print(f"Wrote {registrar.written}")
    params = placeholders(model)
    if params:
        print("Host parameters required:")
        for name in params:
            print(f"  %{name}%")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
