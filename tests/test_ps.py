from types import SimpleNamespace

import psutil
import pytest

from winix import ps


class _FakeProc:
    def __init__(self, pid, name, cpu, rss, status="running", io=None):
        self.info = {
            "pid": pid,
            "name": name,
            "cpu_percent": cpu,
            "memory_info": SimpleNamespace(rss=rss),
            "status": status,
        }
        self._io = io

    def io_counters(self):
        if self._io is None:
            raise psutil.AccessDenied()
        return SimpleNamespace(read_bytes=self._io[0], write_bytes=self._io[1])


@pytest.fixture
def fake_system(monkeypatch):
    procs = [
        _FakeProc(11, "low", 1.0, 100),
        _FakeProc(22, "x" * 40, 75.0, 2048, io=(1024, 0)),
        _FakeProc(33, "mid", 20.0, 0, status="sleeping"),
    ]
    monkeypatch.setattr(psutil, "process_iter", lambda *a, **k: iter(procs))
    monkeypatch.setattr(psutil, "cpu_count", lambda *a, **k: 4)
    monkeypatch.setattr(psutil, "cpu_percent", lambda *a, **k: 12.5)
    monkeypatch.setattr(
        psutil, "virtual_memory", lambda: SimpleNamespace(total=4096, available=1024)
    )
    monkeypatch.setattr(psutil, "swap_memory", lambda: SimpleNamespace(total=0, used=0))
    return procs


def test_format_bytes_zero():
    assert ps.format_bytes(0) == "0 B"


def test_format_bytes_small_values_stay_in_bytes():
    for value in (1, 7, 1023):
        assert ps.format_bytes(value) == f"{value} B"


@pytest.mark.parametrize("power,unit", [(1, "KB"), (2, "MB"), (3, "GB"), (4, "TB")])
def test_format_bytes_powers_of_1024(power, unit):
    assert ps.format_bytes(1024**power) == f"1.0 {unit}"


def test_format_bytes_caps_at_terabytes():
    assert ps.format_bytes(1024**6).endswith(" TB")


def test_truncate_string_short_unchanged():
    assert ps.truncate_string("short", 24) == "short"
    assert ps.truncate_string("a" * 24, 24) == "a" * 24


def test_truncate_string_long_is_cut():
    result = ps.truncate_string("b" * 30, 24)
    assert len(result) == 24
    assert result == "b" * 21 + "..."


def test_execute_sorts_by_cpu(fake_system, capsys):
    ps.execute()
    out = capsys.readouterr().out
    assert "PROCESS LIST" in out
    rows = [line for line in out.splitlines() if line[:2] in ("11", "22", "33")]
    assert [row.split()[0] for row in rows] == ["22", "33", "11"]


def test_execute_truncates_names_and_reports_totals(fake_system, capsys):
    ps.execute()
    out = capsys.readouterr().out
    assert "x" * 21 + "..." in out
    assert "x" * 22 not in out
    assert "Total processes: 3" in out
    assert "CPU cores: 4" in out
    assert "Global CPU usage: 12.5%" in out


def test_execute_disk_fallback_and_status(fake_system, capsys):
    ps.execute()
    lines = capsys.readouterr().out.splitlines()
    low = next(line for line in lines if line.startswith("11"))
    mid = next(line for line in lines if line.startswith("33"))
    assert "0 B/0 B" in low
    assert "Run" in low
    assert "Sleep" in mid