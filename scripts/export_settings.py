#!/usr/bin/env python3
# scripts/export_settings.py
from __future__ import annotations
import sys

from ci_model.cli import main

if __name__ == "__main__":
    sys.exit(main())
