# Camo tracker: terminal checklist of camo unlocks, grouped by weapon category.
#
# Components:
#   schema.py    - Data model (ChecklistEntry) and storage errors
#   store.py     - JSON persistence, seeding, toggle
#   index.py     - Category grouping and display labels
#   navigator.py - Two-state navigation controller (root <-> category)
#   config.py    - YAML configuration
#   tui.py       - rich/readchar terminal adapter
#   cli.py       - Command-line entry point

__version__ = "1.0.0"
