"""System snapshots rendered as text for the dashboard and its command prompt."""

from __future__ import annotations

import platform
import socket
import time
from dataclasses import dataclass

import psutil

_KB = 1024.0
_MB = 1024.0 * 1024.0
_GB = 1024.0 * 1024.0 * 1024.0

_DISK_HEADER = "Filesystem     Size      Used      Avail     Use%   Mounted on\n"
_NO_SENSORS = "No temperature sensors found or accessible.\n"


@dataclass(frozen=True)
class MemoryInfo:
    """Fraction of memory in use and a multi-line description."""

    usage_ratio: float
    details: str


def format_bytes(bytes: int) -> str:
    """Format a byte count with one decimal in KB, MB or GB."""
    if bytes / _GB >= 1.0:
        return f"{bytes / _GB:.1f} GB"
    if bytes / _MB >= 1.0:
        return f"{bytes / _MB:.1f} MB"
    if bytes / _KB >= 1.0:
        return f"{bytes / _KB:.1f} KB"
    return f"{bytes} B"


def format_uptime(seconds: int) -> str:
    """Describe an uptime in whole days, hours and minutes."""
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    return f"System uptime: {days} days, {hours} hours, {minutes} minutes"


def _uptime_seconds() -> int:
    return max(int(time.time() - psutil.boot_time()), 0)


def _hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def _os_lines() -> list[str]:
    fields = [
        ("OS", platform.system()),
        ("OS Version", platform.version()),
        ("Kernel", platform.release()),
    ]
    lines = [f"{name}: {value}" for name, value in fields if value]
    lines.append(f"Architecture: {platform.machine()}")
    hostname = _hostname()
    if hostname:
        lines.append(f"Hostname: {hostname}")
    return lines


def system_info() -> str:
    """Operating system, architecture, host name and CPU count."""
    lines = _os_lines()
    lines.append(f"Total CPUs: {psutil.cpu_count() or 0}")
    return "".join(f"{line}\n" for line in lines)


def uptime_info() -> str:
    """Uptime broken into days, hours and minutes, plus raw seconds."""
    seconds = _uptime_seconds()
    return f"{format_uptime(seconds)}\nBoot time: {seconds} seconds ago"


def _short_name(name: str) -> str:
    return f"{name[:17]}..." if len(name) > 20 else name


def _processes() -> list[tuple[int, str, float, int]]:
    rows = []
    for proc in psutil.process_iter(["pid", "name", "cpu_percent", "memory_info"]):
        info = proc.info
        memory = info.get("memory_info")
        rows.append(
            (
                info["pid"],
                info.get("name") or "",
                info.get("cpu_percent") or 0.0,
                memory.rss if memory else 0,
            )
        )
    rows.sort(key=lambda row: row[2], reverse=True)
    return rows


def process_list(limit: int = 15) -> list[tuple[str, str, str, str]]:
    """Top processes by CPU as (pid, name, cpu%, memory) strings."""
    return [
        (str(pid), _short_name(name), f"{cpu:.1f}%", format_bytes(memory))
        for pid, name, cpu, memory in _processes()[:limit]
    ]


def _memory_figures() -> tuple[int, int, int, int]:
    vm = psutil.virtual_memory()
    swap = psutil.swap_memory()
    used = max(vm.total - vm.available, 0)
    return vm.total, used, swap.total, swap.used


def memory_info() -> MemoryInfo:
    """Memory usage ratio with totals for memory and swap."""
    total, used, swap_total, swap_used = _memory_figures()
    ratio = used / total if total > 0 else 0.0
    details = (
        f"Total Memory: {format_bytes(total)}\n"
        f"Used Memory: {format_bytes(used)}\n"
        f"Free Memory: {format_bytes(total - used)}\n"
        f"Total Swap: {format_bytes(swap_total)}\n"
        f"Used Swap: {format_bytes(swap_used)}"
    )
    return MemoryInfo(usage_ratio=ratio, details=details)


def _disk_table(rule: str) -> str:
    lines = [_DISK_HEADER, rule * 70, "\n"]
    for part in psutil.disk_partitions():
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except OSError:
            continue
        total = usage.total
        available = usage.free
        used = max(total - available, 0)
        percent = used / total * 100.0 if total > 0 else 0.0
        lines.append(
            f"{part.device:<14} {format_bytes(total):<9} {format_bytes(used):<9} "
            f"{format_bytes(available):<9} {percent:<6.1f}% {part.mountpoint}\n"
        )
    return "".join(lines)


def disk_info() -> str:
    """Table of mounted filesystems with size, usage and mount point."""
    return _disk_table("─")


def _components() -> list[tuple[str, float | None, float | None, float | None]]:
    reader = getattr(psutil, "sensors_temperatures", None)
    if reader is None:
        return []
    try:
        data = reader()
    except (OSError, RuntimeError):
        return []
    return [
        (f"{chip} {entry.label}" if entry.label else chip, entry.current, entry.high, entry.critical)
        for chip, entries in (data or {}).items()
        for entry in entries
    ]


def sensor_info() -> str:
    """Component temperatures with their maximum and critical values."""
    components = _components()
    if not components:
        return (
            _NO_SENSORS
            + "Note: On Windows, temperature sensors may require:\n"
            + "  - Administrator privileges\n"
            + "  - Hardware that supports temperature monitoring\n"
            + "  - Proper drivers installed\n"
        )
    parts = ["Component Temperatures:\n", "─" * 40, "\n"]
    for label, temperature, high, critical in components:
        if temperature is None:
            continue
        line = f"{label}: {temperature:.1f}°C"
        if high is not None:
            line += f" (max: {high:.1f}°C)"
        if critical is not None:
            line += f" (critical: {critical:.1f}°C)"
        parts.append(f"{line}\n")
    return "".join(parts)


def capture_uname_output() -> str:
    """System identification lines for the ``uname`` command."""
    return "".join(f"{line}\n" for line in _os_lines())


def capture_ps_output() -> str:
    """The ten busiest processes as a text table."""
    parts = ["PID      NAME                     CPU%     MEMORY\n", "=" * 50, "\n"]
    for pid, name, cpu, memory in _processes()[:10]:
        parts.append(f"{pid:<8} {_short_name(name):<23} {cpu:<8.1f} {format_bytes(memory)}\n")
    return "".join(parts)


def capture_free_output() -> str:
    """Memory and swap totals for the ``free`` command."""
    total, used, swap_total, swap_used = _memory_figures()
    return (
        f"Used memory : {format_bytes(used)}\n"
        f"Total memory: {format_bytes(total)}\n"
        f"Total swap  : {format_bytes(swap_total)}\n"
        f"Used swap   : {format_bytes(swap_used)}"
    )


def capture_df_output() -> str:
    """Filesystem table for the ``df`` command."""
    return _disk_table("=")


def capture_uptime_output() -> str:
    """Uptime line for the ``uptime`` command."""
    return format_uptime(_uptime_seconds())


def capture_sensors_output() -> str:
    """Temperatures for the ``sensors`` command."""
    components = _components()
    if not components:
        return (
            "No temperature sensors found or accessible.\n"
            "Note: On Windows, temperature sensors may require administrator privileges."
        )
    parts = ["Component Temperatures:\n", "=" * 30, "\n"]
    for label, temperature, _high, _critical in components:
        if temperature is not None:
            parts.append(f"{label}: {temperature:.1f}°C\n")
    return "".join(parts)