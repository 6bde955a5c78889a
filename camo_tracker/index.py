"""
Category index: entries grouped by category, with display labels.

The index is always derived from the store's collection and is never edited
in place. Rebuild it after every change to the collection.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .schema import ChecklistEntry

DEFAULT_DONE_MARKER = "✅"


@dataclass(frozen=True)
class Row:
    """One displayable entry: identity plus its rendered label."""
    name: str
    category: str
    label: str
    done: bool


def make_label(entry: ChecklistEntry, done_marker: str = DEFAULT_DONE_MARKER) -> str:
    """Label shown for an entry: its name, plus the marker once done."""
    if entry.done and done_marker:
        return f"{entry.name} {done_marker}"
    return entry.name


class CategoryIndex:
    """Read-only grouping of entries by category, in first-appearance order."""

    def __init__(self, groups: Dict[str, List[Row]]):
        self._groups = groups

    @classmethod
    def build(cls, entries: Iterable[ChecklistEntry], done_marker: str = DEFAULT_DONE_MARKER) -> "CategoryIndex":
        """Group entries, keeping their relative order within each category."""
        groups: Dict[str, List[Row]] = {}
        for entry in entries:
            row = Row(
                name=entry.name,
                category=entry.category,
                label=make_label(entry, done_marker),
                done=entry.done,
            )
            # dicts keep insertion order, so categories stay in first-seen order
            groups.setdefault(entry.category, []).append(row)
        return cls(groups)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CategoryIndex):
            return NotImplemented
        return list(self._groups.items()) == list(other._groups.items())

    def __repr__(self) -> str:
        return f"CategoryIndex({self.categories()!r})"

    def categories(self) -> List[str]:
        """Category names in order of first appearance."""
        return list(self._groups)

    def rows_of(self, category: str) -> List[Row]:
        """Rows for a category, or [] if it does not exist."""
        return list(self._groups.get(category, []))

    def items_of(self, category: str) -> List[str]:
        """Display labels for a category, or [] if it does not exist."""
        return [row.label for row in self._groups.get(category, [])]

    def progress(self, category: str) -> Tuple[int, int]:
        """(done, total) for a category."""
        rows = self._groups.get(category, [])
        return sum(1 for row in rows if row.done), len(rows)

    def summary(self) -> str:
        """Plain-text progress report, one line per category."""
        if not self._groups:
            return "No entries found."

        done_total = sum(self.progress(c)[0] for c in self._groups)
        total = sum(self.progress(c)[1] for c in self._groups)
        lines = [f"📋 Progress: {done_total}/{total}"]
        for category in self._groups:
            done, count = self.progress(category)
            emoji = "✅" if count and done == count else "⬜"
            lines.append(f"{emoji} {category}: {done}/{count}")
        return "\n".join(lines)


def rebuild(entries: Iterable[ChecklistEntry], done_marker: str = DEFAULT_DONE_MARKER) -> CategoryIndex:
    """Build a fresh index from the collection."""
    return CategoryIndex.build(entries, done_marker)
