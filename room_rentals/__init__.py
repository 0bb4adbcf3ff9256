"""
room_rentals — local SQLite tracker for rented rooms.

Subpackages
───────────
store  — RentalRecord model + RentalStore persistence layer
gui    — PyQt6 front-end and its pure-Python view models
"""
