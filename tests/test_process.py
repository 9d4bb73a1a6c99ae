import sys

import pytest

from winix.process import ProcessError, spawn, to_wide_null


def test_to_wide_null_basic():
    wide = to_wide_null("hello")
    assert wide[-1] == 0
    assert wide[:5] == [104, 101, 108, 108, 111]


def test_to_wide_null_error_on_null():
    with pytest.raises(ProcessError) as info:
        to_wide_null("hel\0lo")
    assert info.value.kind == "null_termination"


def test_to_wide_null_surrogate_pair():
    wide = to_wide_null("\U0001F600")
    assert len(wide) == 3
    assert wide[-1] == 0


def test_spawn_invalid_exe_path():
    with pytest.raises(ProcessError) as info:
        spawn("C:/not_a_real_exe.exe", [], None)
    assert info.value.kind == "io"


def test_spawn_rejects_null_in_args():
    with pytest.raises(ProcessError) as info:
        spawn(sys.executable, ["a\0b"], None)
    assert info.value.kind == "null_termination"


def test_spawn_rejects_null_in_dir():
    with pytest.raises(ProcessError) as info:
        spawn(sys.executable, [], "bad\0dir")
    assert info.value.kind == "null_termination"


def test_spawn_runs_process(tmp_path):
    with spawn(sys.executable, ["-c", "pass"], str(tmp_path)) as handle:
        assert handle.wait(timeout=60) == 0
    assert handle.closed


def test_close_then_wait_raises():
    handle = spawn(sys.executable, ["-c", "pass"], None)
    handle.close()
    assert handle.closed
    with pytest.raises(ProcessError):
        handle.wait()