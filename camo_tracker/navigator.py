"""
Navigation controller.

Two views:
  ROOT      → list of category names
  CATEGORY  → list of item labels for one category

Events from the terminal adapter are applied to an explicit NavigationState
by Navigator.handle(). Selecting a category drills in, selecting an item
toggles it, back returns to the root.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .index import CategoryIndex, Row, rebuild, DEFAULT_DONE_MARKER
from .schema import StorageIOError
from .store import ItemStore

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "BO6 Camo Tracker"
DEFAULT_WIDTH = 20


class View(Enum):
    """Which list is on screen."""
    ROOT = "root"
    CATEGORY = "category"


class EventKind(Enum):
    """Abstract commands decoded from key presses."""
    SELECT = "select"
    BACK = "back"
    QUIT = "quit"
    RESIZE = "resize"
    UP = "up"
    DOWN = "down"


@dataclass
class Event:
    """One input event. `width` is only set for RESIZE."""
    kind: EventKind
    width: Optional[int] = None

    @classmethod
    def resize(cls, width: int) -> "Event":
        return cls(EventKind.RESIZE, width=width)


@dataclass
class NavigationState:
    """Mutable UI state, owned by the caller and passed to Navigator.handle()."""
    view: View = View.ROOT
    category: Optional[str] = None
    cursor: int = 0
    root_cursor: int = 0
    width: int = DEFAULT_WIDTH
    status: str = ""
    quitting: bool = False


@dataclass
class Screen:
    """Everything the adapter needs to draw one frame."""
    title: str
    items: List[str] = field(default_factory=list)
    cursor: int = 0
    status: str = ""


class Navigator:
    """Applies events to a NavigationState against the store and index."""

    def __init__(
        self,
        store: ItemStore,
        title: str = DEFAULT_TITLE,
        done_marker: str = DEFAULT_DONE_MARKER,
    ):
        self.store = store
        self.title = title
        self.done_marker = done_marker
        self.index: CategoryIndex = rebuild(store.entries, done_marker)

    def refresh(self) -> CategoryIndex:
        """Rebuild the category index from the store."""
        self.index = rebuild(self.store.entries, self.done_marker)
        return self.index

    # ──────────────────────────────────────────
    # Views
    # ──────────────────────────────────────────

    def items(self, state: NavigationState) -> List[str]:
        """Display strings for the current view."""
        if state.view == View.CATEGORY:
            return self.index.items_of(state.category)
        return self.index.categories()

    def view(self, state: NavigationState) -> Screen:
        """Build the frame for the current state."""
        items = self.items(state)
        title = state.category if state.view == View.CATEGORY else self.title
        cursor = min(state.cursor, max(len(items) - 1, 0))
        return Screen(title=title, items=items, cursor=cursor, status=state.status)

    def selected_row(self, state: NavigationState) -> Optional[Row]:
        """The highlighted row in a category view, or None."""
        if state.view != View.CATEGORY:
            return None
        rows = self.index.rows_of(state.category)
        if not rows or not 0 <= state.cursor < len(rows):
            return None
        return rows[state.cursor]

    # ──────────────────────────────────────────
    # Event handling
    # ──────────────────────────────────────────

    def handle(self, state: NavigationState, event: Event) -> NavigationState:
        """Apply one event to the state. Never raises for in-memory transitions."""
        if state.quitting:
            return state

        if event.kind == EventKind.QUIT:
            state.quitting = True
        elif event.kind == EventKind.RESIZE:
            if event.width is not None:
                state.width = event.width
        elif event.kind == EventKind.UP:
            self._move(state, -1)
        elif event.kind == EventKind.DOWN:
            self._move(state, 1)
        elif event.kind == EventKind.BACK:
            self._back(state)
        elif event.kind == EventKind.SELECT:
            if state.view == View.ROOT:
                self._enter_category(state)
            else:
                self._toggle_selected(state)
        return state

    def _move(self, state: NavigationState, step: int):
        count = len(self.items(state))
        if count == 0:
            state.cursor = 0
            return
        state.cursor = max(0, min(state.cursor + step, count - 1))

    def _enter_category(self, state: NavigationState):
        categories = self.index.categories()
        if not 0 <= state.cursor < len(categories):
            return
        category = categories[state.cursor]
        logger.debug(f"Entering category {category!r}")
        state.root_cursor = state.cursor
        state.view = View.CATEGORY
        state.category = category
        state.cursor = 0

    def _back(self, state: NavigationState):
        if state.view == View.ROOT:
            return
        logger.debug(f"Leaving category {state.category!r}")
        state.view = View.ROOT
        state.category = None
        state.cursor = state.root_cursor

    def _toggle_selected(self, state: NavigationState):
        row = self.selected_row(state)
        if row is None:
            return

        try:
            entry = self.store.toggle(row.name, row.category)
            state.status = ""
        except StorageIOError as e:
            # In-memory flip stands; the next successful save reconciles the file
            logger.error(f"Save failed after toggling {row.name!r}: {e}")
            entry = self.store.find(row.name, row.category)
            state.status = f"⚠ Could not save progress: {e}"

        self.refresh()
        if entry is not None:
            logger.debug(f"Toggled {entry.name!r} in {entry.category!r} -> done={entry.done}")
