"""
Checklist storage backend (JSON file).

Holds the ordered collection in memory and mirrors it to a single JSON
file. The file is seeded from the bundled dataset on first run and is
rewritten in full on every save.
"""
import json
import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional

from .schema import ChecklistEntry, StorageIOError, StorageUnavailable

logger = logging.getLogger(__name__)

DEFAULT_STATE_PATH = Path.home() / ".local" / "share" / "camo-tracker" / "camos.json"
BUNDLED_SEED_PATH = Path(__file__).parent / "data" / "camos.json"


def _parse_entries(raw: str) -> List[ChecklistEntry]:
    """Parse a JSON array of entry objects. Raises ValueError on bad input."""
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [ChecklistEntry.from_dict(item) for item in data]


class ItemStore:
    """JSON-backed store for checklist entries."""

    def __init__(self, state_path: Optional[str] = None, seed_path: Optional[str] = None):
        self.state_path = Path(state_path) if state_path else DEFAULT_STATE_PATH
        self.seed_path = Path(seed_path) if seed_path else BUNDLED_SEED_PATH
        self._entries: List[ChecklistEntry] = []

    @property
    def entries(self) -> List[ChecklistEntry]:
        """The live ordered collection."""
        return self._entries

    def load(self) -> List[ChecklistEntry]:
        """
        Load entries from the state file, seeding it on first run.

        A missing or blank state file is treated as first run: the seed
        dataset is read and written out as the initial state.

        Raises:
            StorageUnavailable if the seed dataset is missing or unparsable.
            StorageIOError if the state file exists but cannot be read or parsed.
        """
        raw = None
        if self.state_path.exists():
            try:
                raw = self.state_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise StorageIOError(f"Cannot read {self.state_path}: {e}") from e

        if raw is None or not raw.strip():
            self._entries = self._load_seed()
            logger.info(f"Seeding {self.state_path} with {len(self._entries)} entries from {self.seed_path}")
            self.save()
        else:
            try:
                self._entries = _parse_entries(raw)
            except ValueError as e:
                # json.JSONDecodeError is a ValueError subclass
                raise StorageIOError(f"Cannot parse {self.state_path}: {e}") from e
            logger.info(f"Loaded {len(self._entries)} entries from {self.state_path}")

        self._warn_duplicates()
        return self._entries

    def _load_seed(self) -> List[ChecklistEntry]:
        """Read the seed dataset with every entry marked not done."""
        try:
            entries = _parse_entries(self.seed_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageUnavailable(f"Cannot load seed data {self.seed_path}: {e}") from e
        for entry in entries:
            entry.done = False
        return entries

    def _warn_duplicates(self):
        counts = Counter(entry.name for entry in self._entries)
        dupes = sorted(name for name, n in counts.items() if n > 1)
        if dupes:
            logger.warning(f"Duplicate entry names across categories: {', '.join(dupes)}")

    def save(self, entries: Optional[List[ChecklistEntry]] = None) -> None:
        """
        Write the full collection to the state file.

        Passing `entries` replaces the in-memory collection first.
        Raises StorageIOError on write failure.
        """
        if entries is not None:
            self._entries = list(entries)

        payload = json.dumps(
            [entry.to_dict() for entry in self._entries],
            indent=2,
            ensure_ascii=False,
        )

        # Atomic write: write to temp, then rename
        tmp_file = self.state_path.with_suffix(self.state_path.suffix + ".tmp")
        try:
            self.state_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_file.write_text(payload + "\n", encoding="utf-8")
            tmp_file.replace(self.state_path)
        except OSError as e:
            if tmp_file.exists():
                try:
                    tmp_file.unlink()
                except OSError as cleanup_error:
                    logger.warning(f"Could not remove {tmp_file}: {cleanup_error}")
            logger.error(f"Failed to save {self.state_path}: {e}")
            raise StorageIOError(f"Cannot write {self.state_path}: {e}") from e

    def find(self, name: str, category: Optional[str] = None) -> Optional[ChecklistEntry]:
        """Return the first entry with this name (and category, if given)."""
        for entry in self._entries:
            if entry.name == name and (category is None or entry.category == category):
                return entry
        return None

    def toggle(self, name: str, category: Optional[str] = None) -> Optional[ChecklistEntry]:
        """
        Flip the done flag of the first matching entry and save.

        Returns the toggled entry, or None when nothing matches (nothing is
        written in that case). If the save fails the in-memory flip is kept
        and StorageIOError propagates to the caller.
        """
        entry = self.find(name, category)
        if entry is None:
            logger.debug(f"Toggle ignored, no entry named {name!r} (category={category!r})")
            return None

        entry.toggle()
        self.save()
        return entry
