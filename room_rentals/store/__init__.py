"""
store — SQLite-backed persistence layer for rented-room records.

Public API
──────────
RentalRecord  — dataclass representing one rental entry
RentalStore   — async CRUD interface (create, list_all, update, delete)
"""

from room_rentals.store.models import RentalRecord
from room_rentals.store.db import RentalStore

__all__ = ["RentalRecord", "RentalStore"]
