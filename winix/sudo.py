"""Run a command with elevated privileges."""

from __future__ import annotations

import subprocess
import sys

USAGE = "Usage: sudo <command> [args]"


def build_command(args: list[str], platform: str) -> list[str]:
    """Return the argv that runs ``args`` elevated on ``platform``."""
    if not args:
        raise ValueError(USAGE)
    if platform == "win32":
        command, *cmd_args = args
        joined = ",".join(f"'{arg}'" for arg in cmd_args)
        script = f"Start-Process '{command}' -ArgumentList {joined} -Verb runAs"
        return ["powershell", "-Command", script]
    return ["sudo", *args]


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the exit status of the elevated command."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        completed = subprocess.run(build_command(args, sys.platform))
    except OSError as exc:
        print(f"Failed to execute sudo command: {exc}", file=sys.stderr)
        return 1
    return completed.returncode if completed.returncode >= 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())