"""Print operating-system, CPU and network information."""

from __future__ import annotations

import platform
import socket

import psutil

_KB = 1024.0
_MB = 1024.0 * 1024.0
_GB = 1024.0 * 1024.0 * 1024.0


def format_memory(bytes: int) -> str:
    """Format a byte count with two decimals in KB, MB or GB."""
    if bytes / _GB >= 1.0:
        return f"{bytes / _GB:.2f} GB"
    if bytes / _MB >= 1.0:
        return f"{bytes / _MB:.2f} MB"
    if bytes / _KB >= 1.0:
        return f"{bytes / _KB:.2f} KB"
    return f"{bytes} bytes"


def _or_unknown(value: object) -> str:
    return str(value) if value else "Unknown"


def _kernel_long_version() -> str:
    return " ".join(part for part in (platform.system(), platform.release()) if part)


def execute() -> None:
    """Print system details and per-interface network totals."""
    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = ""

    print(f"System name:             {_or_unknown(platform.system())}")
    print(f"System kernel version:   {_kernel_long_version()}")
    print(f"System OS version:       {_or_unknown(platform.platform())}")
    print(f"System host name:        {_or_unknown(hostname)}")

    print(f"CPUs:         {psutil.cpu_count() or 0}")
    print(f"CPU usage:    {psutil.cpu_percent(interval=None)}")
    print(f'CPU Architecture: "{platform.machine()}"')
    print(f"Physical cores: {_or_unknown(psutil.cpu_count(logical=False))}")

    print("\nNetworks:")
    for name, counters in psutil.net_io_counters(pernic=True).items():
        print(
            f"{name}: {format_memory(counters.bytes_recv)} (down) / "
            f"{format_memory(counters.bytes_sent)} (up)"
        )