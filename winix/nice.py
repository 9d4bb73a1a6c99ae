"""Run a command at a chosen scheduling priority, using Unix nice values."""

from __future__ import annotations

import enum
import logging
import re
import subprocess
import sys
from dataclasses import dataclass, field

from termcolor import colored

log = logging.getLogger(__name__)

USAGE = (
    "Usage: nice [-increment | -n increment] command [argument...]\n"
    "\n"
    "Priority increments (Unix nice values):\n"
    "-20 to -16  Realtime priority (requires admin)\n"
    "-15 to -11  High priority\n"
    "-10 to -6   Above normal priority\n"
    "-5 to +5    Normal priority (default)\n"
    "+6 to +10   Below normal priority\n"
    "+11 to +19  Idle priority\n"
    "\n"
    "Examples:\n"
    "nice notepad.exe        # Run notepad with default +10 increment\n"
    "nice -10 calc.exe       # Run calculator with high priority\n"
    "nice -n 15 ping google.com  # Run ping with idle priority"
)

DEFAULT_INCREMENT = 10
MIN_INCREMENT = -20
MAX_INCREMENT = 19

_CREATE_NEW_CONSOLE = 0x00000010
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class NiceError(Exception):
    """Raised when nice arguments are invalid or the command cannot start."""


class WindowsPriority(enum.Enum):
    """Windows priority classes; each value is the class flag for process creation."""

    REALTIME = 0x00000100
    HIGH = 0x00000080
    ABOVE_NORMAL = 0x00008000
    NORMAL = 0x00000020
    BELOW_NORMAL = 0x00004000
    IDLE = 0x00000040


_PRIORITY_NAMES = {
    WindowsPriority.REALTIME: "realtime",
    WindowsPriority.HIGH: "high",
    WindowsPriority.ABOVE_NORMAL: "above normal",
    WindowsPriority.NORMAL: "normal",
    WindowsPriority.BELOW_NORMAL: "below normal",
    WindowsPriority.IDLE: "idle",
}


@dataclass
class NiceOptions:
    """Parsed command line of nice."""

    increment: int | None = None
    explicit_increment: int | None = None
    command: str = ""
    arguments: list[str] = field(default_factory=list)


def _parse_int(text: str) -> int | None:
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < _I32_MIN or value > _I32_MAX:
        return None
    return value


def _check_range(increment: int) -> int:
    if increment < MIN_INCREMENT or increment > MAX_INCREMENT:
        raise NiceError(
            f"Invalid nice increment: {increment} (must be between -20 and 19)"
        )
    return increment


def execute(args: list[str]) -> None:
    """Parse the nice arguments and start the command at the chosen priority."""
    if not args:
        raise NiceError(USAGE)

    options = parse_arguments(args)
    validate_options(options)
    log.debug("Parsed options: %r", options)

    increment = options.increment
    if increment is None:
        increment = options.explicit_increment
    if increment is None:
        increment = DEFAULT_INCREMENT

    priority = increment_to_windows_priority(increment)
    log.debug("Using Windows priority class: %s", priority)
    execute_command_with_priority(options.command, options.arguments, priority)


def parse_arguments(args: list[str]) -> NiceOptions:
    """Split the arguments into increment options, the command and its arguments."""
    options = NiceOptions()
    remaining = iter(args)

    for arg in remaining:
        if arg == "-n":
            value_text = next(remaining, None)
            if value_text is None:
                raise NiceError("Option -n requires an increment value")
            value = _parse_int(value_text)
            if value is None:
                raise NiceError(f"Invalid increment value: {value_text}")
            options.explicit_increment = _check_range(value)
        elif arg.startswith("-") and len(arg) > 1:
            value = _parse_int(arg[1:])
            if value is None:
                options.command = arg
                break
            options.increment = _check_range(-value)
        else:
            options.command = arg
            options.arguments = list(remaining)
            break

    return options


def validate_options(options: NiceOptions) -> None:
    """Raise NiceError if the options cannot be used to start a command."""
    if not options.command:
        raise NiceError("No command specified")
    if options.increment is not None and options.explicit_increment is not None:
        raise NiceError("Cannot specify increment with both -increment and -n options")
    if not options.command.strip():
        raise NiceError("Command cannot be empty")


def increment_to_windows_priority(increment: int) -> WindowsPriority:
    """Map a Unix nice value onto a Windows priority class."""
    if -20 <= increment <= -16:
        return WindowsPriority.REALTIME
    if -15 <= increment <= -11:
        return WindowsPriority.HIGH
    if -10 <= increment <= -6:
        return WindowsPriority.ABOVE_NORMAL
    if -5 <= increment <= 5:
        return WindowsPriority.NORMAL
    if 6 <= increment <= 10:
        return WindowsPriority.BELOW_NORMAL
    if 11 <= increment <= 19:
        return WindowsPriority.IDLE
    raise NiceError(f"Invalid nice increment: {increment} (must be between -20 and 19)")


def windows_priority_to_class(priority: WindowsPriority) -> int:
    """Return the process-creation flag for a priority class."""
    return priority.value


def format_priority_name(priority: WindowsPriority) -> str:
    """Return the human-readable name of a priority class."""
    return _PRIORITY_NAMES[priority]


def build_command_line(command: str, arguments: list[str]) -> str:
    """Join a command and its arguments into one quoted command line."""
    if " " in command and not command.startswith('"'):
        parts = [f'"{command}"']
    else:
        parts = [command]
    for arg in arguments:
        if " " in arg or '"' in arg:
            escaped = arg.replace('"', '\\"')
            parts.append(f'"{escaped}"')
        else:
            parts.append(arg)
    return " ".join(parts)


def execute_command_with_priority(
    command: str, arguments: list[str], priority: WindowsPriority
) -> None:
    """Start the command in a new console with the given priority class."""
    log.debug("Executing command '%s' with priority %s", command, priority)
    if sys.platform != "win32":
        raise NiceError("Setting a process priority class requires Windows")

    command_line = build_command_line(command, arguments)
    flags = windows_priority_to_class(priority) | _CREATE_NEW_CONSOLE
    try:
        subprocess.Popen(command_line, creationflags=flags)
    except OSError as exc:
        code = getattr(exc, "winerror", None) or exc.errno
        raise NiceError(
            f"Failed to create process '{command}': Windows error code {code}"
        ) from exc

    message = (
        f"Successfully started '{command}' with "
        f"{format_priority_name(priority)} priority"
    )
    print(colored(message, "green"))