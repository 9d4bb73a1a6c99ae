"""Command prompt of the dashboard: state, built-in commands and their output."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

from winix import monitor, nice, powershell

TAB_COUNT = 7

_GIT_USAGE = [
    "Usage: git <command> [options]",
    "Examples:",
    "  git status",
    "  git log --oneline",
    "  git add .",
    '  git commit -m "message"',
]

_PSH_USAGE = [
    "Usage: psh <command> [options]",
    "Examples:",
    "  psh Get-Process",
    "  psh Get-ChildItem",
    "  psh Get-Service",
    "  psh Test-Connection google.com",
]

_NICE_USAGE = [
    "Usage: nice [-increment | -n increment] command [argument...]",
    "",
    "Priority increments (Unix nice values):",
    "  -20 to -16  Realtime priority (requires admin)",
    "  -15 to -11  High priority",
    "  -10 to -6   Above normal priority",
    "  -5 to +5    Normal priority (default)",
    "  +6 to +10   Below normal priority",
    "  +11 to +19  Idle priority",
    "",
    "Examples:",
    "  nice notepad.exe",
    "  nice -10 calc.exe",
    "  nice -n 15 ping google.com",
]

_HELP_HEAD = [
    "Available commands:",
    "  cd <dir>     - Change directory",
    "  pwd          - Print working directory",
    "  ls           - List files",
    "  uname        - System information",
    "  ps           - Process list",
    "  free         - Memory usage",
    "  df           - Disk usage",
    "  uptime       - System uptime",
    "  sensors      - Temperature sensors",
    "  chmod        - Change permissions",
    "  chown        - Change ownership",
    "  git          - Git version control",
    "  psh          - PowerShell commands",
]
_HELP_NICE = "  nice         - Run command with priority"
_HELP_TAIL = [
    "  clear        - Clear output",
    "  help         - Show this help",
    "",
    "Note: Unknown commands will be passed to PowerShell",
]

_SNAPSHOT_COMMANDS = {
    "uname": monitor.capture_uname_output,
    "ps": monitor.capture_ps_output,
    "free": monitor.capture_free_output,
    "df": monitor.capture_df_output,
    "uptime": monitor.capture_uptime_output,
    "sensors": monitor.capture_sensors_output,
}


def _is_windows() -> bool:
    return sys.platform == "win32"


def _cwd() -> str:
    try:
        return os.getcwd()
    except OSError:
        return "?"


def _lines(text: str) -> list[str]:
    """Split text into lines, dropping a final empty line and trailing CRs."""
    if not text:
        return []
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _collect_output(result: subprocess.CompletedProcess, tool: str) -> str:
    text = _decode(result.stdout) if result.stdout else ""
    if result.stderr:
        if text:
            text += "\n"
        text += _decode(result.stderr)
    if result.returncode != 0 and not text:
        if result.returncode > 0:
            return f"{tool} command failed with exit code: {result.returncode}"
        return f"{tool} command failed"
    return text


@dataclass
class App:
    """State of the dashboard and its command prompt."""

    selected_tab: int = 0
    should_quit: bool = False
    last_update: float = field(default_factory=time.monotonic)
    show_help: bool = False
    current_dir: str = field(default_factory=_cwd)
    ls_items: list[str] = field(default_factory=list)
    ls_selected: int | None = None
    command_input: str = ""
    command_output: list[str] = field(default_factory=list)
    show_command_mode: bool = False

    def __post_init__(self) -> None:
        self.refresh_ls()

    def refresh_ls(self) -> None:
        """Reload the sorted listing of the current directory."""
        items = []
        try:
            entries = list(os.scandir(self.current_dir))
        except OSError:
            entries = []
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            icon = "📁" if is_dir else "📄"
            items.append(f"{icon} {entry.name}")
        self.ls_items = sorted(items)

    def next_tab(self) -> None:
        self.selected_tab = (self.selected_tab + 1) % TAB_COUNT

    def previous_tab(self) -> None:
        self.selected_tab = (self.selected_tab - 1) % TAB_COUNT

    def toggle_help(self) -> None:
        self.show_help = not self.show_help

    def toggle_command_mode(self) -> None:
        """Open or close the prompt; closing discards the typed input."""
        self.show_command_mode = not self.show_command_mode
        if not self.show_command_mode:
            self.command_input = ""

    def execute_command(self) -> None:
        """Run the typed command and replace the output with its result."""
        parts = self.command_input.split()
        if not parts:
            return
        command = parts[0].lower()
        args = parts[1:]
        self.command_output = []
        out = self.command_output

        if command == "cd":
            if args:
                self._change_directory(args[0])
            else:
                out.append("Usage: cd <directory>")
        elif command == "pwd":
            out.append(self.current_dir)
        elif command == "ls":
            out.extend(self.ls_items)
        elif command in _SNAPSHOT_COMMANDS:
            out.extend(_lines(_SNAPSHOT_COMMANDS[command]()))
        elif command == "chmod":
            if len(parts) < 3:
                out.append("Usage: chmod <permissions> <file>")
            else:
                out.extend(_lines(capture_chmod_output(args)))
        elif command == "chown":
            if len(parts) < 3:
                out.append("Usage: chown <owner> <file>")
            else:
                out.extend(_lines(capture_chown_output(args)))
        elif command == "git":
            if args:
                out.extend(_lines(capture_git_output(args)))
            else:
                out.extend(_GIT_USAGE)
        elif command in ("psh", "powershell"):
            if args:
                out.extend(_lines(capture_powershell_output(args)))
            else:
                out.extend(_PSH_USAGE)
        elif command == "nice" and _is_windows():
            if args:
                out.extend(_lines(capture_nice_output(args)))
            else:
                out.extend(_NICE_USAGE)
        elif command == "clear":
            out.clear()
        elif command == "help":
            out.extend(_HELP_HEAD)
            if _is_windows():
                out.append(_HELP_NICE)
            out.extend(_HELP_TAIL)
        else:
            output = capture_powershell_output(parts)
            if output.strip():
                out.extend(_lines(output))
            else:
                out.append(f"Unknown command: '{command}'")
                out.append("Type 'help' for built-in commands")

        self.command_input = ""

    def _change_directory(self, target: str) -> None:
        try:
            os.chdir(target)
        except OSError as exc:
            self.command_output.append(f"cd: {exc}")
            return
        self.current_dir = _cwd()
        self.refresh_ls()
        self.command_output.append(f"Changed directory to: {self.current_dir}")


def capture_chmod_output(args: list[str]) -> str:
    """Report a permission change for ``<permissions> <file>``."""
    if len(args) < 2:
        return "Usage: chmod <permissions> <file>"
    permissions, file = args[0], args[1]
    if Path(file).exists():
        return f"Changed permissions of '{file}' to '{permissions}'"
    return f"File '{file}' not found"


def capture_chown_output(args: list[str]) -> str:
    """Report an ownership change for ``<owner> <file>``."""
    if len(args) < 2:
        return "Usage: chown <owner> <file>"
    owner, file = args[0], args[1]
    if Path(file).exists():
        return f"Changed ownership of '{file}' to '{owner}'"
    return f"File '{file}' not found"


def _is_git_available() -> bool:
    try:
        result = subprocess.run(["git", "--version"], capture_output=True, check=False)
    except OSError:
        return False
    return result.returncode == 0


def capture_git_output(args: list[str]) -> str:
    """Run git with ``args`` and return its combined output."""
    if not _is_git_available():
        return "Error: Git is not installed or not in PATH"
    try:
        result = subprocess.run(["git", *args], capture_output=True, check=False)
    except OSError as exc:
        return f"Failed to execute git command: {exc}"
    return _collect_output(result, "Git")


def _answers_version_query(cmd: str) -> bool:
    try:
        result = subprocess.run(
            [cmd, "-Command", "$PSVersionTable.PSVersion"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def capture_powershell_output(args: list[str]) -> str:
    """Run the joined arguments in PowerShell and return its combined output."""
    if not powershell.is_powershell_available():
        return "Error: PowerShell is not available on this system"
    ps_exe = "pwsh" if _answers_version_query("pwsh") else "powershell"
    try:
        result = subprocess.run(
            [ps_exe, "-Command", " ".join(args)], capture_output=True, check=False
        )
    except OSError as exc:
        return f"Failed to execute PowerShell command: {exc}"
    return _collect_output(result, "PowerShell")


def capture_nice_output(args: list[str]) -> str:
    """Start a command through nice and describe the outcome."""
    try:
        nice.execute(args)
    except nice.NiceError as exc:
        return f"nice: {exc}"
    return "Command executed successfully with nice priority"