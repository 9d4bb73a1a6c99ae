"""Full-screen dashboard with system tabs, a file list, git status and a command prompt."""

from __future__ import annotations

import argparse
import subprocess
import textwrap
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from blessed import Terminal

from winix import monitor
from winix.shell import TAB_COUNT, App

TAB_TITLES = ("System", "Processes", "Memory", "Disks", "Sensors", "Files", "Git")

REFRESH_SECONDS = 10.0
POLL_SECONDS = 0.05

_GRAY = "white"
_DARK_GRAY = "bright_black"
_WHITE = "bright_white"

_STATUS_COLORS = {
    "M": "yellow",
    "AM": "yellow",
    "A": "green",
    "AA": "green",
    "D": "red",
    "AD": "red",
    "R": "blue",
    "AR": "blue",
    "C": "cyan",
    "AC": "cyan",
    "??": _GRAY,
}

_KEY_ALIASES = {
    "\t": "KEY_TAB",
    "\r": "KEY_ENTER",
    "\n": "KEY_ENTER",
    "\x1b": "KEY_ESCAPE",
    "\x7f": "KEY_BACKSPACE",
    "\x08": "KEY_BACKSPACE",
}

Segment = tuple[str, str]
Line = list[Segment]


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int


def centered_rect(percent_x: int, percent_y: int, rect: Rect) -> Rect:
    """Return a rectangle taking the given percentages of ``rect``, centred in it."""
    for percent in (percent_x, percent_y):
        if not 0 <= percent <= 100:
            raise ValueError(f"percentage out of range: {percent}")
    top = rect.height * ((100 - percent_y) // 2) // 100
    height = rect.height * percent_y // 100
    left = rect.width * ((100 - percent_x) // 2) // 100
    width = rect.width * percent_x // 100
    return Rect(rect.x + left, rect.y + top, width, height)


def parse_git_status_line(line: str) -> tuple[str, str, str]:
    """Split a ``git status --porcelain`` line into status, file name and colour."""
    if len(line) >= 3:
        status, filename = line[:2], line[3:]
    else:
        status, filename = "??", line
    color = _STATUS_COLORS.get(status.strip(), _WHITE)
    return status, filename, color


def split_log_line(line: str) -> tuple[str, str | None]:
    """Split a ``git log --oneline`` line into the hash and the message."""
    head, sep, rest = line.partition(" ")
    if not sep:
        return line, None
    return head, rest


def _key_name(key: Any) -> str:
    if getattr(key, "is_sequence", False) and getattr(key, "name", None):
        return key.name
    text = str(key)
    return _KEY_ALIASES.get(text, text)


def handle_key(app: App, key: Any) -> None:
    """Apply one key press to the dashboard state."""
    name = _key_name(key)
    if app.show_command_mode:
        if name in ("KEY_BACKSPACE", "KEY_DELETE"):
            app.command_input = app.command_input[:-1]
        elif name == "KEY_ENTER":
            app.execute_command()
        elif name == "KEY_ESCAPE":
            app.toggle_command_mode()
        elif len(name) == 1 and name.isprintable():
            app.command_input += name
        return

    if name in ("q", "Q"):
        app.should_quit = True
    elif name in ("h", "H"):
        app.toggle_help()
    elif name in ("c", "C"):
        app.toggle_command_mode()
    elif name == "KEY_LEFT":
        app.previous_tab()
    elif name in ("KEY_RIGHT", "KEY_TAB"):
        app.next_tab()
    elif name in ("r", "R"):
        app.last_update = time.monotonic()


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


class _Snapshot:
    """Data fetched for the screen, kept until the next refresh."""

    def __init__(self) -> None:
        self._stamp: float | None = None
        self._values: dict[Any, Any] = {}

    def get(self, stamp: float, key: Any, factory: Callable[[], Any]) -> Any:
        if stamp != self._stamp:
            self._values.clear()
            self._stamp = stamp
        if key not in self._values:
            self._values[key] = factory()
        return self._values[key]


def _styled(term: Terminal, style: str, text: str) -> str:
    if not style or not text:
        return text
    return getattr(term, style)(text)


def _render_line(term: Terminal, segments: Line, width: int) -> str:
    out = []
    remaining = width
    for text, style in segments:
        if remaining <= 0:
            break
        piece = text[:remaining]
        remaining -= len(piece)
        out.append(_styled(term, style, piece))
    out.append(" " * remaining)
    return "".join(out)


def _text_lines(text: str, width: int, style: str = "") -> list[Line]:
    lines: list[Line] = []
    for raw in text.split("\n"):
        stripped = raw.strip()
        if not stripped:
            lines.append([("", style)])
            continue
        for piece in textwrap.wrap(stripped, max(width, 1)) or [""]:
            lines.append([(piece, style)])
    if lines and lines[-1] == [("", style)] and text.endswith("\n"):
        lines.pop()
    return lines


def _box(term: Terminal, rect: Rect, title: str, lines: list[Line]) -> str:
    if rect.width < 2 or rect.height < 2:
        return ""
    inner = rect.width - 2
    label = title[:inner]
    top = "┌" + label + "─" * (inner - len(label)) + "┐"
    out = [term.move_xy(rect.x, rect.y) + top]
    for row in range(rect.height - 2):
        segments = lines[row] if row < len(lines) else []
        out.append(
            term.move_xy(rect.x, rect.y + 1 + row)
            + "│"
            + _render_line(term, segments, inner)
            + "│"
        )
    out.append(term.move_xy(rect.x, rect.y + rect.height - 1) + "└" + "─" * inner + "┘")
    return "".join(out)


def _text_box(term: Terminal, rect: Rect, title: str, text: str) -> str:
    return _box(term, rect, title, _text_lines(text, rect.width - 2))


def _split_rows(rect: Rect, first: int) -> tuple[Rect, Rect]:
    first = min(max(first, 0), rect.height)
    return (
        Rect(rect.x, rect.y, rect.width, first),
        Rect(rect.x, rect.y + first, rect.width, rect.height - first),
    )


def _header(term: Terminal, rect: Rect) -> str:
    line: Line = [
        ("WINIX", "bold_cyan"),
        (" | ", _DARK_GRAY),
        ("Linux Commands on Windows", _WHITE),
    ]
    return _box(term, rect, "", [line])


def _footer(term: Terminal, rect: Rect) -> str:
    line: Line = []
    for index, (key, action) in enumerate(
        [("Tab/Arrow Keys: ", "Navigate"), ("H: ", "Help"), ("C: ", "Command"), ("Q: ", "Quit")]
    ):
        if index:
            line.append((" | ", _DARK_GRAY))
        line.extend([(key, "cyan"), (action, _WHITE)])
    return _box(term, rect, "", [line])


def _tabs(term: Terminal, rect: Rect, selected: int) -> str:
    line: Line = []
    for index, title in enumerate(TAB_TITLES):
        if index:
            line.append((" │ ", _GRAY))
        line.append((title, "bold_cyan" if index == selected else _GRAY))
    return _box(term, rect, "Dashboard", [line])


def _system_tab(term: Terminal, rect: Rect, data: Callable) -> str:
    upper, lower = _split_rows(rect, rect.height * 60 // 100)
    return _text_box(
        term, upper, "System Information", data("system", monitor.system_info)
    ) + _text_box(term, lower, "Uptime", data("uptime", monitor.uptime_info))


def _processes_tab(term: Terminal, rect: Rect, data: Callable) -> str:
    inner = max(rect.width - 2, 0)
    widths = [8, inner * 50 // 100, 8, inner * 25 // 100]

    def row(cells: tuple[str, ...]) -> str:
        return " ".join(cell[:w].ljust(w) for cell, w in zip(cells, widths))

    lines: list[Line] = [[(row(("PID", "Name", "CPU%", "Memory")), "cyan")]]
    lines.extend([(row(p), "")] for p in data("processes", monitor.process_list))
    return _box(term, rect, "Top Processes", lines)


def _gauge_line(ratio: float, width: int) -> Line:
    ratio = min(max(ratio, 0.0), 1.0)
    label = f"{ratio * 100.0:.1f}%"
    cells = list(" " * width)
    start = max((width - len(label)) // 2, 0)
    for offset, char in enumerate(label[:width]):
        cells[start + offset] = char
    filled = int(round(ratio * width))
    return [("".join(cells[:filled]), "black_on_cyan"), ("".join(cells[filled:]), "cyan")]


def _memory_tab(term: Terminal, rect: Rect, data: Callable) -> str:
    info = data("memory", monitor.memory_info)
    gauge, details = _split_rows(rect, 3)
    return _box(
        term, gauge, "Memory Usage", [_gauge_line(info.usage_ratio, max(rect.width - 2, 0))]
    ) + _text_box(term, details, "Memory Details", info.details)


def _disks_tab(term: Terminal, rect: Rect, data: Callable) -> str:
    return _text_box(term, rect, "Disk Usage", data("disks", monitor.disk_info))


def _sensors_tab(term: Terminal, rect: Rect, data: Callable) -> str:
    return _text_box(term, rect, "Temperature Sensors", data("sensors", monitor.sensor_info))


def _files_tab(term: Terminal, rect: Rect, app: App) -> str:
    top, rest = _split_rows(rect, 3)
    items: list[Line] = [[(item, "")] for item in app.ls_items]
    return _box(
        term, top, "Current Directory", [[(f"📁 {app.current_dir}", "")]]
    ) + _box(term, rest, "Files & Directories", items)


def _run_git(args: list[str]) -> subprocess.CompletedProcess | None:
    try:
        return subprocess.run(["git", *args], capture_output=True, check=False)
    except OSError:
        return None


def _git_stdout(args: list[str], fallback: str) -> str:
    result = _run_git(args)
    if result is None:
        return fallback
    return result.stdout.decode("utf-8", errors="replace")


def _is_git_repo() -> bool:
    result = _run_git(["rev-parse", "--is-inside-work-tree"])
    return (
        result is not None
        and result.returncode == 0
        and result.stdout.decode("utf-8", errors="replace").strip() == "true"
    )


def _repo_status() -> str | None:
    result = _run_git(["status", "--porcelain"])
    if result is None or result.returncode != 0:
        return None
    return "clean" if not result.stdout.strip() else "dirty"


def _current_branch() -> str | None:
    result = _run_git(["rev-parse", "--abbrev-ref", "HEAD"])
    if result is None or result.returncode != 0:
        return None
    branch = result.stdout.decode("utf-8", errors="replace").strip()
    return branch or None


def _git_snapshot() -> dict[str, Any]:
    if not _is_git_repo():
        return {"repo": False}
    return {
        "repo": True,
        "status": _repo_status(),
        "branch": _current_branch() or "HEAD",
        "porcelain": _git_stdout(["status", "--porcelain"], "Error getting status"),
        "log": _git_stdout(["log", "--oneline", "-10"], "Error getting log"),
    }


def _status_lines(porcelain: str) -> list[Line]:
    if not porcelain.strip():
        return [[("Working tree clean", "green")]]
    lines: list[Line] = []
    for raw in porcelain.splitlines()[:10]:
        status, filename, color = parse_git_status_line(raw)
        lines.append([(f"{status} ", color), (filename, _WHITE)])
    return lines


def _log_lines(log: str) -> list[Line]:
    if not log.strip():
        return [[("No commits yet", _GRAY)]]
    lines: list[Line] = []
    for raw in log.splitlines():
        head, message = split_log_line(raw)
        if message is None:
            lines.append([(head, _WHITE)])
        else:
            lines.append([(head, "yellow"), (" ", ""), (message, _WHITE)])
    return lines


def _git_tab(term: Terminal, rect: Rect, app: App, data: Callable) -> str:
    info = data("git", _git_snapshot)
    if not info["repo"]:
        lines: list[Line] = [
            [("Not a Git Repository", "bold_red")],
            [],
            [("Navigate to a Git repository or initialize one with:", _GRAY)],
            [],
            [("git init", "cyan"), (" - Initialize a new Git repository", _GRAY)],
            [("git clone <url>", "cyan"), (" - Clone an existing repository", _GRAY)],
        ]
        return _box(term, rect, "Git Information", lines)

    repo_rect, rest = _split_rows(rect, 8)
    branch_rect, bottom = _split_rows(rest, 8)

    status = info["status"]
    if status == "clean":
        status_segment: Segment = ("Clean ✓", "green")
    elif status == "dirty":
        status_segment = ("Modified ✗", "red")
    elif status is None:
        status_segment = ("Error getting status", "red")
    else:
        status_segment = ("Unknown", "yellow")

    repo_lines: list[Line] = [
        [("Repository: ", "cyan"), (app.current_dir, _WHITE)],
        [],
        [("Git Status: ", "cyan"), status_segment],
    ]
    branch_lines: list[Line] = [
        [("Current Branch: ", "cyan"), (info["branch"], "bold_magenta")],
        [],
        [("Quick Commands:", "yellow")],
        [("  Press 'c' to run git commands", _GRAY)],
    ]

    half = bottom.width * 50 // 100
    left = Rect(bottom.x, bottom.y, half, bottom.height)
    right = Rect(bottom.x + half, bottom.y, bottom.width - half, bottom.height)
    return (
        _box(term, repo_rect, "Repository Information", repo_lines)
        + _box(term, branch_rect, "Branch Information", branch_lines)
        + _box(term, left, "Working Tree Status", _status_lines(info["porcelain"]))
        + _box(term, right, "Recent Commits", _log_lines(info["log"]))
    )


_HELP_TEXT = [
    "",
    "Navigation:",
    "  Tab / ← → : Switch between tabs",
    "  H         : Toggle help",
    "  C         : Open command mode",
    "  Q         : Quit",
    "",
    "Tabs:",
    "  System    : OS information",
    "  Processes : Running processes",
    "  Memory    : Memory usage",
    "  Disks     : Disk usage",
    "  Sensors   : Temperature sensors",
    "  Files     : File browser",
    "",
    "Press H to close",
]


def _help_popup(term: Terminal, screen: Rect) -> str:
    area = centered_rect(70, 80, screen)
    lines: list[Line] = [[("Winix Help", "bold_cyan")]]
    lines.extend([(text, "")] for text in _HELP_TEXT)
    return _box(term, area, "Help", lines)


def _command_popup(term: Terminal, screen: Rect, app: App) -> str:
    area = centered_rect(80, 60, screen)
    top, rest = _split_rows(area, 3)
    output: list[Line] = []
    for text in app.command_output:
        output.extend(_text_lines(text, rest.width - 2) or [[("", "")]])
    return _box(term, top, "Command (ESC to close)", [[(app.command_input, "cyan")]]) + _box(
        term, rest, "Output", output
    )


def _draw(term: Terminal, app: App, snapshot: _Snapshot) -> str:
    screen = Rect(0, 0, term.width, term.height)

    def data(name: str, factory: Callable[[], Any]) -> Any:
        return snapshot.get(app.last_update, (name, app.current_dir), factory)

    header, rest = _split_rows(screen, 3)
    body, footer = _split_rows(rest, max(rest.height - 3, 0))
    tab_bar, content = _split_rows(body, 3)

    frame = [_header(term, header), _tabs(term, tab_bar, app.selected_tab)]
    tab = app.selected_tab
    if tab == 0:
        frame.append(_system_tab(term, content, data))
    elif tab == 1:
        frame.append(_processes_tab(term, content, data))
    elif tab == 2:
        frame.append(_memory_tab(term, content, data))
    elif tab == 3:
        frame.append(_disks_tab(term, content, data))
    elif tab == 4:
        frame.append(_sensors_tab(term, content, data))
    elif tab == 5:
        frame.append(_files_tab(term, content, app))
    elif tab == 6:
        frame.append(_git_tab(term, content, app, data))
    frame.append(_footer(term, footer))

    if app.show_help:
        frame.append(_help_popup(term, screen))
    if app.show_command_mode:
        frame.append(_command_popup(term, screen, app))
    return "".join(frame)


def run_tui() -> None:
    """Show the dashboard until the user quits."""
    term = Terminal()
    app = App()
    snapshot = _Snapshot()
    previous_frame = None
    previous_size = None

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        while True:
            size = (term.width, term.height)
            frame = _draw(term, app, snapshot)
            if size != previous_size or frame != previous_frame:
                prefix = term.home + term.clear if size != previous_size else ""
                print(prefix + frame, end="", flush=True)
                previous_frame, previous_size = frame, size

            key = term.inkey(timeout=POLL_SECONDS)
            if key:
                handle_key(app, key)

            if app.should_quit:
                break

            if time.monotonic() - app.last_update >= REFRESH_SECONDS:
                app.last_update = time.monotonic()


def main(argv: list[str] | None = None) -> int:
    """Entry point of the dashboard."""
    parser = argparse.ArgumentParser(
        prog="winix", description="Interactive system dashboard."
    )
    parser.parse_args(argv)
    run_tui()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())