"""
gui — PyQt6 front-end for the room rentals tracker.

Public API
──────────
main_window.MainWindow  — top-level application window
viewmodels              — pure-Python state containers (no Qt import)
pages                   — list screen and add/edit dialog

Only viewmodels is imported here so it stays usable without a display.
"""

from room_rentals.gui import viewmodels

__all__ = ["viewmodels"]
