# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations
"""
Utility package for ci_model.
Exports:
- fs: filesystem helpers (safe filenames, directories, atomic writes)
"""
from . import fs as fs  # re-export
__all__ = ["fs"]
