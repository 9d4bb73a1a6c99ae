"""Remove files."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable
from pathlib import Path


def rm(files: Iterable[str | os.PathLike]) -> None:
    """Delete each regular file; warn about missing paths and non-files."""
    for file_path in files:
        path = Path(file_path)
        if not path.exists():
            print(f"Warning: File '{path}' not found", file=sys.stderr)
        elif path.is_file():
            path.unlink()
            print(f"Removed file: {path}")
        else:
            print(f"Warning: '{path}' is not a file", file=sys.stderr)