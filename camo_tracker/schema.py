"""
Checklist entry schema and storage errors.

An entry is one line of the checklist: a name, the category it is listed
under, and whether it has been completed.
"""
from dataclasses import dataclass
from typing import Any, Dict


class StorageUnavailable(Exception):
    """Raised when the bundled seed dataset is missing or unparsable."""
    pass


class StorageIOError(Exception):
    """Raised when the state file cannot be read, parsed, or written."""
    pass


@dataclass
class ChecklistEntry:
    """One checklist item."""

    name: str
    category: str
    done: bool = False

    def toggle(self) -> bool:
        """Flip the completion flag and return the new value."""
        self.done = not self.done
        return self.done

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with stable field order (name, category, done)."""
        return {
            "name": self.name,
            "category": self.category,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChecklistEntry":
        """
        Deserialize from dict.

        `name` and `category` are mandatory non-empty strings. `done` is
        optional (seed files and older state files omit it) and defaults
        to False.

        Raises ValueError on a malformed record.
        """
        if not isinstance(data, dict):
            raise ValueError(f"entry must be an object, got {type(data).__name__}")

        for key in ("name", "category"):
            value = data.get(key)
            if not isinstance(value, str) or not value:
                raise ValueError(f"entry field '{key}' must be a non-empty string, got {value!r}")

        done = data.get("done", False)
        if not isinstance(done, bool):
            raise ValueError(f"entry field 'done' must be a boolean, got {done!r}")

        return cls(name=data["name"], category=data["category"], done=done)
