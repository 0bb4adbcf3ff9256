"""
Unit tests for room_rentals/gui/viewmodels.py — no Qt dependency.

Coverage plan
─────────────
parse_form           → accepted input, each rejection rule
RentalListViewModel  → refresh, add, edit, remove, selection,
                       failure keeps the previous list, describe
"""

import asyncio

import pytest


def run(coro):
    return asyncio.run(coro)


# ─────────────────────────────────────────────────────────────────────────────
# 1. parse_form
# ─────────────────────────────────────────────────────────────────────────────

class TestParseForm:
    """Dialog input is checked before anything reaches the store."""

    def test_valid_input_is_converted(self):
        from room_rentals.gui.viewmodels import parse_form
        assert parse_form("101", "Alice", "3") == (101, "Alice", 3)

    def test_whitespace_is_stripped(self):
        from room_rentals.gui.viewmodels import parse_form
        assert parse_form(" 7 ", "  Bob ", "2\n") == (7, "Bob", 2)

    @pytest.mark.parametrize(
        "room,name,days",
        [
            ("0", "Alice", "3"),
            ("-5", "Alice", "3"),
            ("abc", "Alice", "3"),
            ("101", "", "3"),
            ("101", "   ", "3"),
            ("101", "Alice", "0"),
            ("101", "Alice", "2.5"),
            ("", "", ""),
        ],
    )
    def test_invalid_input_raises(self, room, name, days):
        from room_rentals.exceptions import ValidationError
        from room_rentals.gui.viewmodels import parse_form
        with pytest.raises(ValidationError):
            parse_form(room, name, days)

    def test_error_lists_every_problem(self):
        from room_rentals.exceptions import ValidationError
        from room_rentals.gui.viewmodels import parse_form
        with pytest.raises(ValidationError) as info:
            parse_form("x", "", "y")
        msg = str(info.value)
        assert "room number" in msg
        assert "client name" in msg
        assert "renting duration" in msg


# ─────────────────────────────────────────────────────────────────────────────
# 2. RentalListViewModel
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def store(tmp_path):
    from room_rentals.store.db import RentalStore
    s = RentalStore(db_path=str(tmp_path / "vm.db"))
    yield s
    s.close()


@pytest.fixture
def vm(store):
    from room_rentals.gui.viewmodels import RentalListViewModel
    return RentalListViewModel(store)


class _BrokenStore:
    """Stand-in store whose every call fails like a locked database."""

    async def _fail(self, *args):
        from room_rentals.exceptions import StorageFailure
        raise StorageFailure("database is locked")

    list_all = create = update = delete = _fail


class TestRentalListViewModel:

    def test_initial_state_is_empty(self, vm):
        assert vm.records == []
        assert vm.selected is None
        assert vm.last_error is None

    def test_add_persists_and_reloads(self, vm, store):
        row_id = run(vm.add("101", "Alice", "3"))
        assert [r.id for r in vm.records] == [row_id]
        assert vm.records[0].client_name == "Alice"
        assert len(run(store.list_all())) == 1

    def test_add_with_invalid_input_does_not_touch_store(self, vm, store):
        from room_rentals.exceptions import ValidationError
        with pytest.raises(ValidationError):
            run(vm.add("0", "Alice", "3"))
        assert not store.is_open

    def test_edit_keeps_id(self, vm):
        row_id = run(vm.add("101", "Alice", "3"))
        run(vm.edit(vm.records[0], "101", "Alice", "5"))
        assert vm.records[0].id == row_id
        assert vm.records[0].renting_duration == 5

    def test_edit_record_without_id_raises_missing_identity(self, vm):
        from room_rentals.exceptions import MissingIdentity
        from room_rentals.store.models import RentalRecord
        with pytest.raises(MissingIdentity):
            run(vm.edit(RentalRecord(1, "Nobody", 1), "1", "Nobody", "2"))
        assert vm.last_error is not None

    def test_remove_deletes_and_clears_selection(self, vm):
        run(vm.add("101", "Alice", "3"))
        vm.select(vm.records[0])
        run(vm.remove(vm.records[0].id))
        assert vm.records == []
        assert vm.selected is None

    def test_refresh_keeps_selection_when_record_still_exists(self, vm):
        run(vm.add("1", "A", "1"))
        run(vm.add("2", "B", "1"))
        vm.select(vm.records[1])
        run(vm.refresh())
        assert vm.selected is not None
        assert vm.selected.client_name == "B"

    def test_failed_refresh_keeps_previous_records(self, vm):
        from room_rentals.exceptions import StorageFailure
        run(vm.add("101", "Alice", "3"))
        shown = list(vm.records)
        vm._store = _BrokenStore()
        with pytest.raises(StorageFailure):
            run(vm.refresh())
        assert vm.records == shown
        assert vm.last_error == "database is locked"

    def test_failed_add_keeps_previous_records(self, vm):
        from room_rentals.exceptions import StorageFailure
        run(vm.add("101", "Alice", "3"))
        shown = list(vm.records)
        vm._store = _BrokenStore()
        with pytest.raises(StorageFailure):
            run(vm.add("102", "Bob", "1"))
        assert vm.records == shown

    def test_describe_formats_list_row(self):
        from room_rentals.gui.viewmodels import RentalListViewModel
        from room_rentals.store.models import RentalRecord
        title, subtitle = RentalListViewModel.describe(RentalRecord(101, "Alice", 3, id=1))
        assert title == "Alice"
        assert subtitle == "Room Number: 101, Renting Duration: 3 days"
