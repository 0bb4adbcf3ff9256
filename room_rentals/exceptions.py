"""
Project-wide custom exception hierarchy.
All modules raise subclasses of RentalsBaseError — never bare Exception.
"""

__all__ = [
    "RentalsBaseError",
    "RecordError",
    "MalformedRecord",
    "MissingIdentity",
    "StorageFailure",
    "ValidationError",
]


class RentalsBaseError(Exception):
    """Root exception for all room_rentals errors."""


# ── Record ────────────────────────────────────────────────────────────────────

class RecordError(RentalsBaseError):
    """Base class for problems with a single rental record."""


class MalformedRecord(RecordError):
    """Raised when a field map is missing required fields or has the wrong types."""


class MissingIdentity(RecordError):
    """Raised when an operation needs a record id but the record has none."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StorageFailure(RentalsBaseError):
    """Raised on SQLite I/O or engine errors (original error is chained)."""


# ── GUI ───────────────────────────────────────────────────────────────────────

class ValidationError(RentalsBaseError):
    """Raised when rental form input is rejected before reaching the store."""
