# SPDX-License-Identifier: Apache-2.0
"""
ci_model

Declarative CI build model for TeamCity project settings.
Exposes nothing at import-time beyond package markers; import from
`ci_model.models`, `ci_model.services` or `ci_model.projects`.
"""
from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
