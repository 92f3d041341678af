# SPDX-License-Identifier: Apache-2.0
"""
Filesystem utilities: safe filenames, directories, atomic text writes.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def safe_filename(name: str) -> str:
    s = (name or "").strip().replace("\\", "/").split("/")[-1]
    s = "".join(ch for ch in s if ch.isalnum() or ch in ("-", "_", ".", " "))
    s = "_".join(s.split())  # collapse whitespace
    return s


def ensure_dir(path: Path | str) -> Path:
    p = Path(path).expanduser().resolve()
    p.mkdir(parents=True, exist_ok=True)
    return p


def atomic_write_text(path: Path | str, text: str, encoding: str = "utf-8") -> Path:
    """
    Write `text` to a temp file next to `path`, then rename it into place.
    Readers see either the old file or the complete new one.
    """
    target = Path(path)
    ensure_dir(target.parent)
    fd, tmp = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding) as fh:
            fh.write(text)
        os.replace(tmp, target)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    return target
