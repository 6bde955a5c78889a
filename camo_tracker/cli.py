#!/usr/bin/env python3
"""
Camo tracker — main entry point

Interactive checklist of camo unlocks, grouped by category.
Progress is saved to a local JSON file after every toggle.

Usage:
    camo-tracker                          # default config and state file
    camo-tracker --state ./camos.json     # use a specific state file
    camo-tracker --summary                # print progress and exit
"""

import sys
import argparse
import logging
from pathlib import Path

from . import tui
from .config import Config, ConfigError
from .navigator import NavigationState, Navigator
from .schema import StorageIOError, StorageUnavailable
from .store import ItemStore

logger = logging.getLogger(__name__)


def setup_logging(cfg: Config, verbose: bool = False, to_stderr: bool = False):
    """Log to a file while the terminal session owns the screen."""
    level = logging.DEBUG if verbose else getattr(logging, str(cfg.log_level).upper(), logging.INFO)

    handlers = []
    if to_stderr or not cfg.log_path:
        handlers.append(logging.StreamHandler(sys.stderr))
    else:
        log_file = Path(cfg.log_path)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError:
            handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        format="%(asctime)s [camo-tracker] %(levelname)s: %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="camo-tracker",
        description="Camo Tracker — terminal checklist with saved progress",
    )
    ap.add_argument(
        "--config", default=None,
        help="Path to config.yaml (default: ~/.config/camo-tracker/config.yaml)",
    )
    ap.add_argument(
        "--state", default=None,
        help="Progress file (default: ~/.local/share/camo-tracker/camos.json)",
    )
    ap.add_argument(
        "--seed", default=None,
        help="Seed dataset used on first run (default: bundled camos.json)",
    )
    ap.add_argument(
        "--title", default=None,
        help="Title shown above the category list",
    )
    ap.add_argument(
        "--log-file", default=None,
        help="Log file (default: ~/.local/share/camo-tracker/tracker.log)",
    )
    ap.add_argument(
        "--summary", action="store_true",
        help="Print progress per category and exit",
    )
    ap.add_argument(
        "-v", "--verbose", action="store_true",
        help="Debug logging",
    )
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = Config.load(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # CLI overrides
    if args.state:
        cfg.state_path = args.state
    if args.seed:
        cfg.seed_path = args.seed
    if args.title:
        cfg.title = args.title
    if args.log_file:
        cfg.log_path = args.log_file
    cfg.resolve_paths()

    setup_logging(cfg, verbose=args.verbose, to_stderr=args.summary)

    store = ItemStore(cfg.state_path, cfg.seed_path or None)
    try:
        store.load()
    except StorageUnavailable as e:
        print(f"Error loading seed data: {e}", file=sys.stderr)
        return 1
    except StorageIOError as e:
        print(f"Error loading {cfg.state_path}: {e}", file=sys.stderr)
        return 1

    navigator = Navigator(store, title=cfg.title, done_marker=cfg.done_marker)

    if args.summary:
        print(navigator.index.summary())
        return 0

    state = NavigationState(width=cfg.default_width)
    try:
        tui.run(navigator, state, list_height=cfg.list_height)
    except Exception as e:
        logger.exception("Terminal session failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
