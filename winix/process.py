"""Start a child process from an executable path and argument list."""

from __future__ import annotations

import subprocess
import sys
from types import TracebackType

_CREATE_UNICODE_ENVIRONMENT = 0x00000400


class ProcessError(Exception):
    """Raised when a process cannot be started.

    ``kind`` is ``"io"`` for operating-system failures and
    ``"null_termination"`` when a string holds an embedded NUL.
    """

    def __init__(self, message: str, kind: str = "io") -> None:
        super().__init__(message)
        self.kind = kind


class ProcessHandle:
    """A started child process; close it to release it."""

    def __init__(self, process: subprocess.Popen) -> None:
        self._process: subprocess.Popen | None = process
        self.pid = process.pid

    @property
    def closed(self) -> bool:
        return self._process is None

    def wait(self, timeout: float | None = None) -> int:
        """Wait for the process to finish and return its exit code."""
        if self._process is None:
            raise ProcessError("process handle is closed")
        return self._process.wait(timeout)

    def close(self) -> None:
        """Release the handle without waiting for the process."""
        if self._process is not None:
            self._process.poll()
            self._process = None

    def __enter__(self) -> ProcessHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def to_wide_null(s: str) -> list[int]:
    """Encode a string as NUL-terminated UTF-16 code units."""
    data = s.encode("utf-16-le", "surrogatepass")
    wide = [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]
    if 0 in wide:
        raise ProcessError("string contains an interior NUL", kind="null_termination")
    wide.append(0)
    return wide


def spawn(
    exe_path: str, args: list[str], current_dir: str | None = None
) -> ProcessHandle:
    """Start ``exe_path`` with ``args``, optionally in ``current_dir``."""
    command_line = " ".join([exe_path, *args])
    to_wide_null(command_line)
    to_wide_null(exe_path)
    if current_dir is not None:
        to_wide_null(current_dir)

    try:
        if sys.platform == "win32":
            process = subprocess.Popen(
                command_line,
                executable=exe_path,
                cwd=current_dir,
                creationflags=_CREATE_UNICODE_ENVIRONMENT,
            )
        else:
            process = subprocess.Popen([exe_path, *args], cwd=current_dir)
    except OSError as exc:
        raise ProcessError(str(exc)) from exc
    return ProcessHandle(process)