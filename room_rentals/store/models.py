"""Data models for the store module."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from room_rentals.exceptions import MalformedRecord

__all__ = ["RentalRecord", "FIELD_NAMES"]

# Column names used at the storage boundary, in table order
FIELD_NAMES = ("id", "roomNumber", "clientName", "rentingDuration")


def _is_int(value: Any) -> bool:
    # bool is an int subclass; a True room number is a bug, not a value
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class RentalRecord:
    """
    One rented room entry.

    Fields
    ──────
    room_number      — physical room identifier (not unique; rooms get re-rented)
    client_name      — name of the renter
    renting_duration — number of days rented
    id               — SQLite row id (None until created)

    Range checks (positive numbers, non-empty name) belong to the caller;
    the store persists whatever it is handed.
    """
    room_number:      int
    client_name:      str
    renting_duration: int
    id:               Optional[int] = None

    def to_field_map(self) -> dict[str, Any]:
        """Return the column-name → value mapping written to the table."""
        return {
            "id":              self.id,
            "roomNumber":      self.room_number,
            "clientName":      self.client_name,
            "rentingDuration": self.renting_duration,
        }

    @classmethod
    def from_field_map(cls, mapping: Mapping[str, Any]) -> "RentalRecord":
        """
        Build a RentalRecord from a column-name mapping (dict or sqlite3.Row).

        Raises:
            MalformedRecord: on unknown keys, a missing required key, or a
                             value of the wrong type.
        """
        try:
            data = dict(mapping)
        except (TypeError, ValueError) as exc:
            raise MalformedRecord(f"not a field map: {mapping!r}") from exc

        unknown = sorted(set(data) - set(FIELD_NAMES))
        if unknown:
            raise MalformedRecord(f"unknown fields: {', '.join(unknown)}")

        missing = [k for k in FIELD_NAMES[1:] if k not in data]
        if missing:
            raise MalformedRecord(f"missing fields: {', '.join(missing)}")

        record_id = data.get("id")
        if record_id is not None and not _is_int(record_id):
            raise MalformedRecord(f"id must be an integer, got {record_id!r}")
        for key in ("roomNumber", "rentingDuration"):
            if not _is_int(data[key]):
                raise MalformedRecord(f"{key} must be an integer, got {data[key]!r}")
        if not isinstance(data["clientName"], str):
            raise MalformedRecord(
                f"clientName must be text, got {data['clientName']!r}"
            )

        return cls(
            id=record_id,
            room_number=data["roomNumber"],
            client_name=data["clientName"],
            renting_duration=data["rentingDuration"],
        )

    def __str__(self) -> str:
        return (
            f"RentalRecord(id={self.id}, room={self.room_number}, "
            f"client={self.client_name!r}, days={self.renting_duration})"
        )
