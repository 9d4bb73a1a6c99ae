"""List running processes sorted by CPU usage, with a system summary."""

from __future__ import annotations

import psutil

_UNITS = ("B", "KB", "MB", "GB", "TB")
_ROW = "{:<8} {:<25} {:<8} {:<10} {:<12} {:<15}"
_TOP = 25

_STATUS_NAMES = {
    "running": "Run",
    "sleeping": "Sleep",
    "disk-sleep": "UninterruptibleDiskSleep",
    "stopped": "Stop",
    "tracing-stop": "Tracing",
    "zombie": "Zombie",
    "dead": "Dead",
    "wake-kill": "Wakekill",
    "waking": "Waking",
    "idle": "Idle",
    "parked": "Parked",
    "locked": "LockBlocked",
}


def format_bytes(bytes: int) -> str:
    """Format a byte count in B, KB, MB, GB or TB."""
    if bytes == 0:
        return "0 B"
    size = float(bytes)
    unit_index = 0
    while size >= 1024.0 and unit_index < len(_UNITS) - 1:
        size /= 1024.0
        unit_index += 1
    if unit_index == 0:
        return f"{bytes} {_UNITS[0]}"
    return f"{size:.1f} {_UNITS[unit_index]}"


def truncate_string(s: str, max_len: int) -> str:
    """Shorten ``s`` to ``max_len`` characters, ending in ``...`` when cut."""
    if len(s) <= max_len:
        return s
    return f"{s[:max(max_len - 3, 0)]}..."


def _status_name(status: str | None) -> str:
    if not status:
        return "Unknown"
    return _STATUS_NAMES.get(status, status.title())


def _disk_io(proc) -> tuple[int, int]:
    try:
        counters = proc.io_counters()
    except (AttributeError, NotImplementedError, psutil.Error, OSError):
        return 0, 0
    return counters.read_bytes, counters.write_bytes


def _snapshot() -> list[tuple]:
    rows = []
    for proc in psutil.process_iter(["pid", "name", "cpu_percent", "memory_info", "status"]):
        info = proc.info
        memory = info.get("memory_info")
        read, written = _disk_io(proc)
        rows.append(
            (
                info["pid"],
                info.get("name") or "",
                info.get("cpu_percent") or 0.0,
                memory.rss if memory else 0,
                read,
                written,
                info.get("status"),
            )
        )
    rows.sort(key=lambda row: row[2], reverse=True)
    return rows


def execute() -> None:
    """Print the top processes by CPU usage and a system summary."""
    processes = _snapshot()

    print("=" * 90)
    print(f"{'PROCESS LIST':^90}")
    print("=" * 90)
    print(_ROW.format("PID", "NAME", "CPU%", "MEMORY", "DISK R/W", "STATUS"))
    print("-" * 90)

    for pid, name, cpu, memory, read, written, status in processes[:_TOP]:
        print(
            _ROW.format(
                pid,
                truncate_string(name, 24),
                f"{cpu:.1f}",
                format_bytes(memory),
                f"{format_bytes(read)}/{format_bytes(written)}",
                _status_name(status),
            )
        )

    print("-" * 90)

    vm = psutil.virtual_memory()
    swap = psutil.swap_memory()
    print(f"\n{'SYSTEM SUMMARY':^40}")
    print("-" * 40)
    print(f"Total processes: {len(processes)}")
    print(f"CPU cores: {psutil.cpu_count() or 0}")
    print(f"Global CPU usage: {psutil.cpu_percent(interval=None):.1f}%")
    print(f"Total memory: {format_bytes(vm.total)}")
    print(f"Used memory: {format_bytes(max(vm.total - vm.available, 0))}")
    print(f"Total swap: {format_bytes(swap.total)}")
    print(f"Used swap: {format_bytes(swap.used)}")