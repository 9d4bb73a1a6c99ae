"""Print component temperatures."""

from __future__ import annotations

import psutil
from termcolor import colored


def _dimmed(text: str, color: str | None = None) -> str:
    return colored(text, color, attrs=["dark"])


def format_sensor_line(
    label: str,
    temperature: float | None,
    high: float | None,
    critical: float | None,
) -> str | None:
    """Return the coloured line for one sensor, or None if it has no reading."""
    if temperature is None or temperature <= 0.0:
        return None

    temp_str = f"{temperature:.1f}°C"
    if critical is not None:
        if temperature >= critical:
            shown = colored(temp_str, "red", attrs=["bold"])
        elif temperature >= critical * 0.8:
            shown = colored(temp_str, "yellow")
        else:
            shown = colored(temp_str, "green")
    else:
        shown = colored(temp_str, "cyan")

    line = f"{colored(label, attrs=['bold'])}: {shown}"
    if high is not None and high > 0.0:
        line += " " + _dimmed(f"(Max: {high:.1f}°C)")
    if critical is not None and critical > 0.0:
        line += " " + _dimmed(f"[Critical: {critical:.1f}°C]", "red")
    return line


def _components() -> list[tuple[str, float | None, float | None, float | None]]:
    reader = getattr(psutil, "sensors_temperatures", None)
    if reader is None:
        return []
    try:
        data = reader()
    except (OSError, RuntimeError):
        return []
    components = []
    for chip, entries in (data or {}).items():
        for entry in entries:
            label = f"{chip} {entry.label}" if entry.label else chip
            components.append((label, entry.current, entry.high, entry.critical))
    return components


def execute() -> None:
    """Print every sensor with a reading, coloured by how close it is to critical."""
    print(colored("System Component Temperatures:", "blue", attrs=["bold"]))
    print("=" * 50)

    components = _components()
    if not components:
        print(colored("No temperature sensors found or accessible.", "yellow"))
        print(_dimmed("Note: On Windows, temperature sensors may require:"))
        print(_dimmed("  - Administrator privileges"))
        print(_dimmed("  - Hardware that supports temperature monitoring"))
        print(_dimmed("  - Proper drivers installed"))
        return

    sensor_count = 0
    for label, temperature, high, critical in components:
        line = format_sensor_line(label, temperature, high, critical)
        if line is not None:
            sensor_count += 1
            print(line)

    if sensor_count == 0:
        print(colored("No valid temperature data available.", "yellow"))
        print(
            _dimmed("This may be normal on Windows systems without accessible sensors.")
        )
    else:
        print("=" * 50)
        print(colored(f"Found {sensor_count} temperature sensor(s)", "green"))