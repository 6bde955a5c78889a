# Camo tracker — configuration
# Override paths and display options via config.yaml or CLI args.

import yaml
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional

CONFIG_PATH = Path.home() / ".config" / "camo-tracker" / "config.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


@dataclass
class Config:
    """Runtime configuration for the tracker."""

    # Storage
    state_path: str = "~/.local/share/camo-tracker/camos.json"
    seed_path: str = ""  # empty = bundled dataset

    # Display
    title: str = "BO6 Camo Tracker"
    done_marker: str = "✅"
    list_height: int = 16
    default_width: int = 20

    # Logging (file only while the terminal session is up)
    log_path: str = "~/.local/share/camo-tracker/tracker.log"
    log_level: str = "INFO"

    def resolve_paths(self):
        """Expand ~ in configured paths."""
        self.state_path = str(Path(self.state_path).expanduser())
        if self.seed_path:
            self.seed_path = str(Path(self.seed_path).expanduser())
        if self.log_path:
            self.log_path = str(Path(self.log_path).expanduser())

    def validate(self):
        """Reject values the UI cannot work with."""
        for name in ("list_height", "default_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        for name in ("state_path", "seed_path", "title", "done_marker", "log_path", "log_level"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {value!r}")
        if not self.state_path:
            raise ConfigError("state_path must not be empty")

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML file, falling back to defaults when absent."""
        cfg_path = Path(path).expanduser() if path else CONFIG_PATH
        if cfg_path.exists():
            try:
                with open(cfg_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                raise ConfigError(f"Cannot read config {cfg_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Config {cfg_path} must be a mapping, got {type(data).__name__}")
            known = {f.name for f in fields(cls)}
            cfg = cls(**{k: v for k, v in data.items() if k in known})
        elif path:
            raise ConfigError(f"Config file not found: {cfg_path}")
        else:
            cfg = cls()
        cfg.validate()
        cfg.resolve_paths()
        return cfg
