from collections import namedtuple
from types import SimpleNamespace

import psutil
import pytest

from winix import monitor

_Temp = namedtuple("_Temp", "label current high critical")


class _FakeProc:
    def __init__(self, pid, name, cpu, rss):
        self.info = {
            "pid": pid,
            "name": name,
            "cpu_percent": cpu,
            "memory_info": SimpleNamespace(rss=rss),
        }


@pytest.fixture
def fake_processes(monkeypatch):
    procs = [_FakeProc(i, f"proc{i}", float(i), i * 1024) for i in range(1, 21)]
    procs.append(_FakeProc(99, "n" * 30, 0.5, 0))
    monkeypatch.setattr(psutil, "process_iter", lambda *a, **k: iter(procs))
    return procs


@pytest.fixture
def fake_memory(monkeypatch):
    monkeypatch.setattr(
        psutil, "virtual_memory", lambda: SimpleNamespace(total=1000, available=250)
    )
    monkeypatch.setattr(psutil, "swap_memory", lambda: SimpleNamespace(total=0, used=0))


@pytest.fixture
def fake_disks(monkeypatch):
    parts = [SimpleNamespace(device="sda1", mountpoint="/mnt/data")]
    monkeypatch.setattr(psutil, "disk_partitions", lambda *a, **k: parts)
    monkeypatch.setattr(
        psutil, "disk_usage", lambda path: SimpleNamespace(total=2048, free=1024)
    )


def test_format_bytes_small_values():
    for value in (0, 1, 1023):
        assert monitor.format_bytes(value) == f"{value} B"


def test_format_bytes_gigabyte():
    assert monitor.format_bytes(1024**3) == "1.0 GB"


def test_format_bytes_units_grow():
    assert monitor.format_bytes(2048).endswith(" KB")
    assert monitor.format_bytes(5 * 1024**2).endswith(" MB")
    assert monitor.format_bytes(7 * 1024**4).endswith(" GB")


def test_format_uptime_components():
    seconds = 3 * 86400 + 4 * 3600 + 5 * 60 + 7
    assert monitor.format_uptime(seconds) == (
        "System uptime: 3 days, 4 hours, 5 minutes"
    )


def test_uptime_outputs():
    assert monitor.uptime_info().startswith("System uptime:")
    assert monitor.uptime_info().endswith("seconds ago")
    captured = monitor.capture_uptime_output()
    assert captured.startswith("System uptime:")
    assert "Boot time" not in captured


def test_system_info_and_uname():
    info = monitor.system_info()
    assert "Architecture:" in info
    assert f"Total CPUs: {psutil.cpu_count() or 0}" in info
    uname = monitor.capture_uname_output()
    assert "Architecture:" in uname
    assert "Total CPUs" not in uname


def test_process_list_sorted_and_limited(fake_processes):
    rows = monitor.process_list(5)
    assert len(rows) == 5
    assert [row[0] for row in rows] == ["20", "19", "18", "17", "16"]
    assert rows[0][2] == "20.0%"
    assert rows[0][3] == monitor.format_bytes(20 * 1024)


def test_process_list_truncates_names(fake_processes):
    rows = monitor.process_list(50)
    long_row = next(row for row in rows if row[0] == "99")
    assert long_row[1] == "n" * 17 + "..."


def test_capture_ps_output(fake_processes):
    lines = monitor.capture_ps_output().splitlines()
    assert lines[0].startswith("PID")
    assert lines[1] == "=" * 50
    assert len(lines) == 12
    assert lines[2].split()[0] == "20"


def test_memory_info_ratio(fake_memory):
    info = monitor.memory_info()
    assert info.usage_ratio == pytest.approx(0.75)
    lines = info.details.splitlines()
    assert lines[0] == f"Total Memory: {monitor.format_bytes(1000)}"
    assert lines[1] == f"Used Memory: {monitor.format_bytes(750)}"
    assert lines[2] == f"Free Memory: {monitor.format_bytes(250)}"


def test_memory_info_zero_total(monkeypatch):
    monkeypatch.setattr(
        psutil, "virtual_memory", lambda: SimpleNamespace(total=0, available=0)
    )
    monkeypatch.setattr(psutil, "swap_memory", lambda: SimpleNamespace(total=0, used=0))
    assert monitor.memory_info().usage_ratio == 0.0


def test_capture_free_output(fake_memory):
    lines = monitor.capture_free_output().splitlines()
    assert [line.split(":")[0].strip() for line in lines] == [
        "Used memory",
        "Total memory",
        "Total swap",
        "Used swap",
    ]


def test_disk_info(fake_disks):
    lines = monitor.disk_info().splitlines()
    assert lines[0].startswith("Filesystem")
    assert lines[1] == "─" * 70
    assert lines[2].startswith("sda1")
    assert lines[2].endswith("% /mnt/data")
    assert "50.0" in lines[2]


def test_capture_df_output(fake_disks):
    lines = monitor.capture_df_output().splitlines()
    assert lines[1] == "=" * 70
    assert len(lines) == 3


def test_sensor_info_empty(monkeypatch):
    monkeypatch.setattr(psutil, "sensors_temperatures", lambda: {}, raising=False)
    assert monitor.sensor_info().startswith("No temperature sensors found or accessible.")
    assert monitor.capture_sensors_output() == (
        "No temperature sensors found or accessible.\n"
        "Note: On Windows, temperature sensors may require administrator privileges."
    )


def test_sensor_info_with_data(monkeypatch):
    data = {"cpu": [_Temp("", 42.0, 80.0, None), _Temp("aux", None, None, None)]}
    monkeypatch.setattr(psutil, "sensors_temperatures", lambda: data, raising=False)
    info = monitor.sensor_info()
    assert "cpu: 42.0°C (max: 80.0°C)\n" in info
    assert "critical" not in info
    assert "aux" not in info
    captured = monitor.capture_sensors_output()
    assert captured.splitlines()[1] == "=" * 30
    assert "cpu: 42.0°C" in captured