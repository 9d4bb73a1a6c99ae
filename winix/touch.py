"""Create files or update their timestamps."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def run(args: list[str]) -> None:
    """Create each missing file and refresh the times of existing ones."""
    for file_name in args:
        path = Path(file_name)
        if not path.exists():
            try:
                with open(path, "wb"):
                    pass
            except OSError as exc:
                print(f"touch: cannot create file '{file_name}': {exc}", file=sys.stderr)
            else:
                print(f"Created '{file_name}'")
        else:
            try:
                os.utime(path, None)
            except OSError as exc:
                print(
                    f"touch: failed to update timestamps for '{file_name}': {exc}",
                    file=sys.stderr,
                )
            else:
                print(f"Updated timestamp for '{file_name}'")