"""Run commands through the system PowerShell."""

from __future__ import annotations

import subprocess
import sys

from termcolor import colored

_NOT_AVAILABLE = "Error: PowerShell is not available on this system"

_COMMON_COMMANDS = [
    ("Get-Process", "List running processes"),
    ("Get-ChildItem", "List files and directories (like ls)"),
    ("Set-Location", "Change directory (like cd)"),
    ("Get-Location", "Get current directory (like pwd)"),
    ("Get-Content", "Read file contents (like cat)"),
    ("Set-Content", "Write content to file"),
    ("Copy-Item", "Copy files or directories (like cp)"),
    ("Move-Item", "Move files or directories (like mv)"),
    ("Remove-Item", "Delete files or directories (like rm)"),
    ("New-Item", "Create new files or directories"),
    ("Get-Service", "List system services"),
    ("Get-EventLog", "Read event logs"),
    ("Get-WmiObject", "Query WMI objects"),
    ("Invoke-WebRequest", "Make HTTP requests (like curl)"),
    ("Test-Connection", "Ping hosts (like ping)"),
]

_EXAMPLES = [
    "ps Get-Process | Where-Object {$_.CPU -gt 100}",
    "ps Get-ChildItem C:\\ -Recurse -Include *.txt",
    "ps Get-Service | Where-Object {$_.Status -eq 'Running'}",
    "ps Test-Connection google.com -Count 4",
    "ps Get-EventLog -LogName System -Newest 10",
    "ps Get-WmiObject -Class Win32_ComputerSystem",
]


def _run(argv: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(argv, capture_output=True, check=False)


def _succeeds(argv: list[str]) -> bool:
    try:
        return _run(argv).returncode == 0
    except OSError:
        return False


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _dimmed(text: str) -> str:
    return colored(text, attrs=["dark"])


def execute(args: list[str]) -> None:
    """Run ``args`` as a PowerShell command, or show help when empty."""
    if not is_powershell_available():
        print(colored(_NOT_AVAILABLE, "red"))
        return
    if not args:
        show_powershell_help()
        return
    execute_powershell_command(args)


def is_powershell_available() -> bool:
    """Return True if either PowerShell Core or Windows PowerShell runs."""
    return is_command_available("pwsh") or is_command_available("powershell")


def is_command_available(cmd: str) -> bool:
    """Return True if ``cmd`` answers ``--version`` or ``--help`` successfully."""
    return _succeeds([cmd, "--version"]) or _succeeds([cmd, "--help"])


def get_powershell_executable() -> str:
    """Prefer ``pwsh``; fall back to ``powershell``."""
    return "pwsh" if is_command_available("pwsh") else "powershell"


def execute_powershell_command(args: list[str]) -> None:
    """Run the joined arguments with ``-Command`` and relay its output."""
    ps_exe = get_powershell_executable()
    command_string = " ".join(args)
    try:
        result = _run([ps_exe, "-Command", command_string])
    except OSError as exc:
        print(
            colored(f"Failed to execute PowerShell command: {exc}", "red"),
            file=sys.stderr,
        )
        return

    if result.stdout:
        print(_decode(result.stdout), end="")
    if result.stderr:
        print(_decode(result.stderr), end="", file=sys.stderr)
    if result.returncode > 0:
        print(
            colored(
                f"PowerShell command failed with exit code: {result.returncode}", "red"
            ),
            file=sys.stderr,
        )


def interactive_mode() -> None:
    """Read PowerShell commands from standard input until ``exit`` or ``quit``."""
    print(colored("PowerShell Interactive Mode", "blue", attrs=["bold"]))
    print(_dimmed("Type PowerShell commands or 'exit' to quit"))
    print(_dimmed("Example: Get-Process, Get-ChildItem, Set-Location C:\\"))
    print()

    while True:
        print(colored("PS> ", "blue", attrs=["bold"]), end="", flush=True)
        try:
            raw = sys.stdin.readline()
        except OSError as exc:
            print(colored(f"Error reading input: {exc}", "red"), file=sys.stderr)
            break
        if raw == "":
            break
        command = raw.strip()
        if not command:
            continue
        if command in ("exit", "quit"):
            print(colored("Exiting PowerShell interactive mode", "green"))
            break
        execute_powershell_command([command])


def show_powershell_help() -> None:
    """Print the common PowerShell commands and usage examples."""
    print(colored("PowerShell Commands Available", "blue", attrs=["bold"]))
    print(_dimmed("Usage: ps <command> [options]"))
    print()

    print(colored("Most Common PowerShell Commands:", "white", attrs=["bold"]))
    for name, description in _COMMON_COMMANDS:
        print(f"  {colored(f'{name:<20}', 'yellow')} {description}")
    print()

    print(colored("Examples:", "cyan", attrs=["bold"]))
    for example in _EXAMPLES:
        print(f"  {_dimmed(example)}")
    print()

    print(colored("Interactive Mode:", "magenta", attrs=["bold"]))
    print(f"  {_dimmed('ps --interactive')}")
    print(
        f"  {_dimmed('  Enter interactive PowerShell mode for easier command execution')}"
    )
    print()

    print(colored("Aliases:", "green", attrs=["bold"]))
    print(f"  {_dimmed('psh = ps (shorter alias for PowerShell commands)')}")


def get_version_info() -> str | None:
    """Return ``"<executable> <version>"`` or None if it cannot be determined."""
    ps_exe = get_powershell_executable()
    try:
        result = _run([ps_exe, "-Command", "$PSVersionTable.PSVersion.ToString()"])
    except OSError:
        return None
    if result.returncode != 0:
        return None
    version = _decode(result.stdout).strip()
    return f"{ps_exe} {version}" if version else None


def check_current_directory() -> bool:
    """Return True if PowerShell can report the current directory."""
    ps_exe = get_powershell_executable()
    return _succeeds([ps_exe, "-Command", "Get-Location"])