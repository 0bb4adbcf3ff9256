"""
RentalStore — SQLite-backed persistence layer for rented-room records.

Usage::

    store = RentalStore(db_path="~/.room-rentals/renting_duration.db")

    # Rent a room
    row_id = await store.create(RentalRecord(101, "Alice", 3))

    # Show everything, oldest first
    for rec in await store.list_all():
        print(rec)

    # Extend the stay, then check out
    await store.update(RentalRecord(101, "Alice", 5, id=row_id))
    await store.delete(row_id)

One store object is built at startup and handed to every consumer.  The
connection is opened lazily by the first operation and then kept for the
lifetime of the store.
"""

import asyncio
import logging
import sqlite3
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Optional

from room_rentals.exceptions import MissingIdentity, StorageFailure
from room_rentals.store.models import RentalRecord

__all__ = ["RentalStore", "DEFAULT_DB_PATH", "TABLE_NAME", "SCHEMA_VERSION"]

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "renting_duration.db"
TABLE_NAME      = "renting_duration_of_the_rooms"
SCHEMA_VERSION  = 1

# Path to the SQL schema file bundled with this package
_SCHEMA_PATH = Path(__file__).parent / "migrations" / "schema.sql"

_COLUMNS = "id, roomNumber, clientName, rentingDuration"


class RentalStore:
    """
    Async CRUD interface for the local rentals table.

    The database file and schema are created automatically by the first
    operation.  A single connection is kept open afterwards.  Opening and
    every statement run on the store's own single-worker executor, so
    callers await them without blocking the loop and no two statements
    ever touch the connection at the same time.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH) -> None:
        self._db_path = Path(db_path).expanduser()
        self._conn: Optional[sqlite3.Connection] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def is_open(self) -> bool:
        """True once the first operation has opened the connection."""
        return self._conn is not None

    # ── Internal helpers ──────────────────────────────────────────────────

    def _connection(self) -> sqlite3.Connection:
        """
        Return the shared connection, opening it and creating the schema on first use.

        Only ever called on the store's worker thread.
        """
        if self._conn is not None:
            return self._conn

        conn: Optional[sqlite3.Connection] = None
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA journal_mode=WAL")
            conn.executescript(_SCHEMA_PATH.read_text(encoding="utf-8"))
        except (sqlite3.Error, OSError) as exc:
            if conn is not None:
                conn.close()
            raise StorageFailure(f"cannot open {self._db_path}: {exc}") from exc

        self._conn = conn
        logger.info("Opened rentals database at %s", self._db_path)
        return conn

    def _call(self, fn: Callable[..., Any], *args: Any) -> Any:
        return fn(self._connection(), *args)

    async def _run(self, fn: Callable[..., Any], *args: Any) -> Any:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="rental-store"
            )
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(self._executor, self._call, fn, *args)
        except (sqlite3.Error, OverflowError) as exc:
            # OverflowError: integer too large for SQLite's 64-bit binding
            raise StorageFailure(str(exc)) from exc

    @staticmethod
    def _insert(conn: sqlite3.Connection, params: dict) -> int:
        with conn:
            cur = conn.execute(
                f"""
                INSERT OR REPLACE INTO {TABLE_NAME} ({_COLUMNS})
                VALUES (:id, :roomNumber, :clientName, :rentingDuration)
                """,
                params,
            )
        return cur.lastrowid  # type: ignore[return-value]

    @staticmethod
    def _select_all(conn: sqlite3.Connection) -> list[sqlite3.Row]:
        return conn.execute(
            f"SELECT {_COLUMNS} FROM {TABLE_NAME} ORDER BY id ASC"
        ).fetchall()

    @staticmethod
    def _update(conn: sqlite3.Connection, params: dict) -> int:
        with conn:
            cur = conn.execute(
                f"""
                UPDATE {TABLE_NAME}
                   SET roomNumber=:roomNumber,
                       clientName=:clientName,
                       rentingDuration=:rentingDuration
                 WHERE id=:id
                """,
                params,
            )
        return cur.rowcount

    @staticmethod
    def _delete(conn: sqlite3.Connection, record_id: int) -> int:
        with conn:
            cur = conn.execute(f"DELETE FROM {TABLE_NAME} WHERE id=?", (record_id,))
        return cur.rowcount

    # ── Public API ────────────────────────────────────────────────────────

    async def create(self, record: RentalRecord) -> int:
        """
        Persist *record* as a new row.

        Uses INSERT OR REPLACE: if record.id already names a row, that row
        is overwritten in full instead of raising a constraint error.
        *record* itself is left untouched.

        Returns:
            The id of the inserted (or replaced) row.
        """
        row_id = await self._run(self._insert, record.to_field_map())
        logger.debug("create: stored %s as id=%s", record, row_id)
        return row_id

    async def list_all(self) -> list[RentalRecord]:
        """
        Return every stored record, ordered by id ascending.

        Records are rebuilt from the table on each call.

        Raises:
            MalformedRecord: if a stored row cannot be turned into a record.
        """
        rows = await self._run(self._select_all)
        return [RentalRecord.from_field_map(r) for r in rows]

    async def update(self, record: RentalRecord) -> None:
        """
        Overwrite room number, client name and duration for record.id.

        Updating an id that has no row is a no-op.

        Raises:
            MissingIdentity: if record.id is None.
        """
        if record.id is None:
            raise MissingIdentity(f"cannot update a record without an id: {record}")
        changed = await self._run(self._update, record.to_field_map())
        logger.debug("update: id=%s, %d row(s) changed", record.id, changed)

    async def delete(self, record_id: int) -> None:
        """Delete the row with *record_id*; a missing id is a no-op."""
        removed = await self._run(self._delete, record_id)
        logger.debug("delete: id=%s, %d row(s) removed", record_id, removed)

    def close(self) -> None:
        """Close the connection if it was opened.  The next operation reopens it."""
        if self._executor is not None:
            # Let queued statements finish before the handle goes away
            self._executor.shutdown(wait=True)
            self._executor = None
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("Closed rentals database at %s", self._db_path)
