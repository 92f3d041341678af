# SPDX-License-Identifier: Apache-2.0
"""
Service layer: project registration and settings documents.

Loggers live under "ci_model.services.*"; handlers are set up by the CLI.
"""
from __future__ import annotations

__all__ = [
    "registry",
    "settings_io",
]
