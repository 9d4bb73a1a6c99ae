"""Print the last lines of files."""

from __future__ import annotations

import asyncio
import os
from collections.abc import AsyncIterator, Iterable
from pathlib import Path


def _chop_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def _start(count: int, lines: int) -> int:
    if lines < 0:
        raise ValueError("line count must not be negative")
    return max(count - lines, 0)


def _split_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    last = pieces.pop()
    result = [_chop_cr(_chop_cr(piece)) for piece in pieces]
    if last:
        result.append(_chop_cr(last))
    return result


def tail_sync(files: Iterable[str | os.PathLike], lines: int) -> str:
    """Return the last ``lines`` lines of every file, one after another."""
    parts = []
    for file_path in files:
        all_lines = _split_lines(Path(file_path).read_text(encoding="utf-8"))
        parts.extend(f"{line}\n" for line in all_lines[_start(len(all_lines), lines):])
    return "".join(parts)


def _decoded_lines(data: bytes) -> list[str]:
    pieces = data.split(b"\n")
    last = pieces.pop()
    entries = [(piece, True) for piece in pieces]
    if last:
        entries.append((last, False))

    result = []
    for raw, terminated in entries:
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            break
        if terminated:
            line = _chop_cr(line)
        result.append(_chop_cr(line))
    return result


async def tail_async(
    files: Iterable[str | os.PathLike], lines: int
) -> AsyncIterator[bytes]:
    """Yield the last ``lines`` lines of the first file as byte chunks."""
    paths = list(files)
    if not paths:
        return
    data = await asyncio.to_thread(Path(paths[0]).read_bytes)
    all_lines = _decoded_lines(data)
    for line in all_lines[_start(len(all_lines), lines):]:
        yield f"{line}\n".encode("utf-8")


async def tail_async_to_string(files: Iterable[str | os.PathLike], lines: int) -> str:
    """Collect the output of :func:`tail_async` into a string."""
    parts = []
    async for chunk in tail_async(files, lines):
        try:
            parts.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    return "".join(parts)