"""Print boot time, uptime and load averages."""

from __future__ import annotations

import time

import psutil


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _load_average() -> tuple[float, float, float]:
    try:
        return psutil.getloadavg()
    except (AttributeError, OSError):
        return (0.0, 0.0, 0.0)


def execute() -> None:
    """Print the boot time, seconds since boot and the 1/5/15-minute load."""
    one, five, fifteen = _load_average()
    boot_time = int(psutil.boot_time())
    uptime = max(int(time.time()) - boot_time, 0)

    print(f"System booted at {boot_time} seconds")
    print(f"System running since {uptime} seconds")
    print(
        f"one minute: {_format_number(one)}%, "
        f"five minutes: {_format_number(five)}%, "
        f"fifteen minutes: {_format_number(fifteen)}%"
    )