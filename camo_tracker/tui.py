"""Terminal adapter: draws the navigator's screen and feeds it key events.

Renders a Rich Live view on the alternate screen and reads keys with
readchar. All state changes go through Navigator.handle().
"""

from __future__ import annotations

from typing import Optional

import readchar
from rich.cells import cell_len, set_cell_size
from rich.console import Console
from rich.live import Live
from rich.text import Text

from .navigator import Event, EventKind, NavigationState, Navigator, Screen

DEFAULT_LIST_HEIGHT = 16
SELECTED_STYLE = "color(170)"
HELP_STYLE = "dim"
STATUS_STYLE = "yellow"
QUIT_TEXT = "Exiting App... Goodbye!"
HELP_TEXT = "↑/k up • ↓/j down • enter select • backspace back • q quit"

_CTRL_C = getattr(readchar.key, "CTRL_C", "\x03")

KEYMAP = {
    readchar.key.ENTER: EventKind.SELECT,
    "\r": EventKind.SELECT,
    "\n": EventKind.SELECT,
    readchar.key.RIGHT: EventKind.SELECT,
    readchar.key.BACKSPACE: EventKind.BACK,
    "\x7f": EventKind.BACK,
    "\x08": EventKind.BACK,
    readchar.key.LEFT: EventKind.BACK,
    readchar.key.UP: EventKind.UP,
    "k": EventKind.UP,
    readchar.key.DOWN: EventKind.DOWN,
    "j": EventKind.DOWN,
    "q": EventKind.QUIT,
    _CTRL_C: EventKind.QUIT,
}


def decode_key(key: str) -> Optional[Event]:
    """Map a raw key to an Event, or None for keys we ignore."""
    kind = KEYMAP.get(key)
    if kind is None:
        return None
    return Event(kind)


def page_bounds(cursor: int, total: int, per_page: int) -> tuple[int, int, int, int]:
    """Return (start, end, page, pages) for the page containing the cursor."""
    if total == 0:
        return 0, 0, 0, 1
    per_page = max(1, per_page)
    pages = (total + per_page - 1) // per_page
    cursor = max(0, min(cursor, total - 1))
    page = cursor // per_page
    start = page * per_page
    return start, min(start + per_page, total), page, pages


def render(screen: Screen, list_height: int = DEFAULT_LIST_HEIGHT, width: Optional[int] = None) -> Text:
    """Build the Rich text for one frame."""
    text = Text(no_wrap=True, overflow="ellipsis")

    def line(content: str, style: str = "") -> None:
        if width and cell_len(content) > width:
            content = set_cell_size(content, max(width - 1, 0)).rstrip() + "…"
        text.append(content, style=style)
        text.append("\n")

    line("")
    line(f"  {screen.title}", "bold")
    line("")

    start, end, page, pages = page_bounds(screen.cursor, len(screen.items), list_height)
    if not screen.items:
        line("    No items.", HELP_STYLE)
    for i in range(start, end):
        label = f"{i + 1}. {screen.items[i]}"
        if i == screen.cursor:
            line(f"  > {label}", SELECTED_STYLE)
        else:
            line(f"    {label}")

    if pages > 1:
        line("")
        line(f"    page {page + 1}/{pages}", HELP_STYLE)

    line("")
    line(f"    {HELP_TEXT}", HELP_STYLE)

    if screen.status:
        line("")
        line(f"    {screen.status}", STATUS_STYLE)

    return text


def run(
    navigator: Navigator,
    state: NavigationState,
    list_height: int = DEFAULT_LIST_HEIGHT,
    console: Optional[Console] = None,
) -> None:
    """Run the interactive loop until the user quits."""
    console = console or Console(highlight=False)

    with Live("", console=console, refresh_per_second=15, screen=True) as live:
        while not state.quitting:
            if console.width != state.width:
                navigator.handle(state, Event.resize(console.width))

            live.update(render(navigator.view(state), list_height, state.width))

            try:
                key = readchar.readkey()
            except (KeyboardInterrupt, EOFError):
                key = _CTRL_C

            event = decode_key(key)
            if event is not None:
                navigator.handle(state, event)

    console.print(Text(f"\n    {QUIT_TEXT}\n"))
