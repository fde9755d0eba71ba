import os
import sys
import time

from rich.console import Console
from rich.live import Live
from rich.panel import Panel

try:  # Windows-specific keyboard handling
    import msvcrt  # type: ignore
except ImportError:  # pragma: no cover - POSIX terminals read whole lines
    msvcrt = None


_CONSOLE = Console()
_KEY_REPEAT_DEBOUNCE_SECONDS = 0.08
_MENU_KEYS = {"UP", "DOWN", "ENTER", "ESC"}


def clear_screen() -> None:
    """Clear the console in a basic cross-platform way."""

    os.system("cls" if os.name == "nt" else "clear")


def _read_key_windows():
    ch = msvcrt.getch()

    if ch in (b"\x00", b"\xe0"):
        arrow = msvcrt.getch()
        if arrow == b"H":
            return "UP"
        if arrow == b"P":
            return "DOWN"
        return None

    if ch in (b"\r", b"\n"):
        return "ENTER"
    if ch == b"\x1b":
        return "ESC"

    try:
        return ch.decode("utf-8")
    except UnicodeDecodeError:
        return None


def read_key():
    """Read a key, defaulting to line input when msvcrt is unavailable."""

    if msvcrt is not None:
        return _read_key_windows()

    line = sys.stdin.readline()
    if line == "":
        return None
    return line.strip()


def normalize_menu_key(key):
    if key is None:
        return None
    if not isinstance(key, str):
        return key
    if key in _MENU_KEYS:
        return key

    mapping = {
        "w": "UP",
        "s": "DOWN",
        "": "ENTER",
        "enter": "ENTER",
        "q": "ESC",
        "esc": "ESC",
    }
    return mapping.get(key.lower().strip(), key)


def _build_menu_panel(title: str, options: list[str], selected: int, footer_hint: str | None) -> Panel:
    body_lines: list[str] = []
    for idx, option in enumerate(options):
        if idx == selected:
            body_lines.append(f"[bold black on cyan] > {option} [/bold black on cyan]")
        else:
            body_lines.append(f"[white]   {option}[/white]")
    if footer_hint:
        body_lines.append("")
        body_lines.append(f"[cyan]{footer_hint}[/cyan]")
    return Panel.fit(
        "\n".join(body_lines),
        title=f"[bold cyan]{str(title or '').strip() or 'Menu'}[/bold cyan]",
        border_style="cyan",
        subtitle="[dim]Up/Down or W/S to move, Enter to confirm, Esc/Q to go back[/dim]",
        subtitle_align="left",
        padding=(0, 1),
    )


def arrow_menu(title: str, options: list[str], footer_hint: str | None = None) -> int:
    """Render a vertical menu controlled by arrow keys.

    Returns the selected option index, or -1 if the user presses ESC or
    input ends. Digits select an option directly.
    """

    if not options:
        raise ValueError("arrow_menu requires at least one option")

    selected = 0
    last_nav_at = 0.0
    with Live(
        _build_menu_panel(title, options, selected, footer_hint),
        console=_CONSOLE,
        refresh_per_second=30,
        transient=True,
    ) as live:
        while True:
            raw_key = read_key()
            if raw_key is None:
                return -1
            key = normalize_menu_key(raw_key)
            now = time.monotonic()
            if key in {"UP", "DOWN"}:
                if msvcrt is not None and now - last_nav_at < _KEY_REPEAT_DEBOUNCE_SECONDS:
                    continue
                last_nav_at = now
                step = -1 if key == "UP" else 1
                selected = (selected + step) % len(options)
                live.update(_build_menu_panel(title, options, selected, footer_hint), refresh=True)
                continue
            if key == "ENTER":
                return selected
            if key == "ESC":
                return -1
            if isinstance(key, str) and key.isdigit() and 1 <= int(key) <= len(options):
                return int(key) - 1
