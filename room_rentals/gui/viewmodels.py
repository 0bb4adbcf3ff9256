"""
GUI ViewModels — pure-Python state containers.

No Qt imports here; every class is testable without a display.
Qt widgets read these objects and redraw themselves after each call.

Public API
──────────
parse_form           — validate the three text fields of the rental dialog
RentalListViewModel  — current rental list + add / edit / remove commands
"""

import logging
from typing import Optional

from room_rentals.exceptions import RentalsBaseError, ValidationError
from room_rentals.store.db import RentalStore
from room_rentals.store.models import RentalRecord

__all__ = ["parse_form", "RentalListViewModel"]

logger = logging.getLogger(__name__)


def _to_int(text: str) -> int:
    """Parse *text* as an int; anything unparsable counts as 0."""
    try:
        return int(text.strip())
    except ValueError:
        return 0


def parse_form(
    room_number: str,
    client_name: str,
    renting_duration: str,
) -> tuple[int, str, int]:
    """
    Turn raw dialog input into (room_number, client_name, renting_duration).

    Raises:
        ValidationError: if the name is blank or either number is not positive.
    """
    room = _to_int(room_number)
    name = client_name.strip()
    days = _to_int(renting_duration)

    problems = []
    if room <= 0:
        problems.append("room number must be a positive whole number")
    if not name:
        problems.append("client name must not be empty")
    if days <= 0:
        problems.append("renting duration must be a positive number of days")
    if problems:
        raise ValidationError("; ".join(problems))
    return room, name, days


class RentalListViewModel:
    """
    Backs the "Rented rooms" list screen.

    Attributes
    ──────────
    records    — records as last loaded from the store (id ascending)
    selected   — the currently highlighted record, or None
    last_error — message of the last failed command, or None

    A failed store call leaves *records* untouched so the previous list
    stays on screen; the error is re-raised to the caller.
    """

    def __init__(self, store: RentalStore) -> None:
        self._store = store
        self.records:    list[RentalRecord]     = []
        self.selected:   Optional[RentalRecord] = None
        self.last_error: Optional[str]          = None

    async def refresh(self) -> None:
        """Reload *records* from the store."""
        try:
            records = await self._store.list_all()
        except RentalsBaseError as exc:
            self.last_error = str(exc)
            raise
        self.records = records
        self.last_error = None
        if self.selected is not None and self.selected.id not in {r.id for r in records}:
            self.selected = None

    async def add(self, room_number: str, client_name: str, renting_duration: str) -> int:
        """Validate form input, create a new rental and reload. Returns the new id."""
        room, name, days = parse_form(room_number, client_name, renting_duration)
        try:
            row_id = await self._store.create(RentalRecord(room, name, days))
        except RentalsBaseError as exc:
            self.last_error = str(exc)
            raise
        logger.info("Rented room %d to %r for %d day(s) (id=%d)", room, name, days, row_id)
        await self.refresh()
        return row_id

    async def edit(
        self,
        record: RentalRecord,
        room_number: str,
        client_name: str,
        renting_duration: str,
    ) -> None:
        """Validate form input and overwrite *record* (same id), then reload."""
        room, name, days = parse_form(room_number, client_name, renting_duration)
        updated = RentalRecord(room, name, days, id=record.id)
        try:
            await self._store.update(updated)
        except RentalsBaseError as exc:
            self.last_error = str(exc)
            raise
        await self.refresh()

    async def remove(self, record_id: int) -> None:
        """Delete the rental with *record_id* and reload."""
        try:
            await self._store.delete(record_id)
        except RentalsBaseError as exc:
            self.last_error = str(exc)
            raise
        await self.refresh()

    def select(self, record: Optional[RentalRecord]) -> None:
        """Mark *record* as selected."""
        self.selected = record

    @staticmethod
    def describe(record: RentalRecord) -> tuple[str, str]:
        """Return the (title, subtitle) pair shown for *record* in the list."""
        return (
            record.client_name,
            f"Room Number: {record.room_number}, "
            f"Renting Duration: {record.renting_duration} days",
        )
