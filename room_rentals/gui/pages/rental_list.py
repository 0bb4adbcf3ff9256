"""
RentalListPage — the "Rented rooms" list screen.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ Rented rooms                            │
  │ ┌──────────────────────────────────────┐│
  │ │ Alice                                ││
  │ │   Room Number: 101, Renting Dur… 3 d ││
  │ │ …                                    ││
  │ └──────────────────────────────────────┘│
  │               [Add] [Edit] [Delete]     │
  └─────────────────────────────────────────┘

Double-clicking a row opens the edit dialog.
"""

import asyncio
import logging
from typing import Coroutine

from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from room_rentals.exceptions import RentalsBaseError
from room_rentals.gui.pages.rental_dialog import RentalDialog
from room_rentals.gui.viewmodels import RentalListViewModel

__all__ = ["RentalListPage"]

logger = logging.getLogger(__name__)


class RentalListPage(QWidget):
    """Shows every rental and offers add / edit / delete."""

    def __init__(self, vm: RentalListViewModel, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        layout.addWidget(QLabel("<b>Rented rooms</b>"))

        self._list = QListWidget()
        self._list.currentRowChanged.connect(self._on_row_changed)
        self._list.itemDoubleClicked.connect(lambda _item: self._on_edit_clicked())
        layout.addWidget(self._list)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._add_btn    = QPushButton("Add")
        self._edit_btn   = QPushButton("Edit")
        self._delete_btn = QPushButton("Delete")
        self._add_btn.clicked.connect(self._on_add_clicked)
        self._edit_btn.clicked.connect(self._on_edit_clicked)
        self._delete_btn.clicked.connect(self._on_delete_clicked)
        btn_row.addWidget(self._add_btn)
        btn_row.addWidget(self._edit_btn)
        btn_row.addWidget(self._delete_btn)
        layout.addLayout(btn_row)

    # ── Helpers ────────────────────────────────────────────────────────────

    def _run(self, coro: Coroutine) -> bool:
        """Drive a view-model command to completion; report failures in a message box."""
        try:
            asyncio.run(coro)
        except RentalsBaseError as exc:
            logger.warning("Rental command failed: %s", exc)
            QMessageBox.warning(self, "Rented rooms", str(exc))
            return False
        finally:
            self._refresh_list()
        return True

    def _refresh_list(self) -> None:
        self._list.clear()
        for rec in self._vm.records:
            title, subtitle = self._vm.describe(rec)
            self._list.addItem(QListWidgetItem(f"{title}\n    {subtitle}"))

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_row_changed(self, row: int) -> None:
        if 0 <= row < len(self._vm.records):
            self._vm.select(self._vm.records[row])
        else:
            self._vm.select(None)

    def _on_add_clicked(self) -> None:
        dlg = RentalDialog(self)
        if dlg.exec() == QDialog.DialogCode.Accepted.value:
            self._run(self._vm.add(*dlg.values()))

    def _on_edit_clicked(self) -> None:
        record = self._vm.selected
        if record is None:
            return
        dlg = RentalDialog(self, record=record)
        if dlg.exec() == QDialog.DialogCode.Accepted.value:
            self._run(self._vm.edit(record, *dlg.values()))

    def _on_delete_clicked(self) -> None:
        record = self._vm.selected
        if record is None or record.id is None:
            return
        self._run(self._vm.remove(record.id))

    # ── Public API ─────────────────────────────────────────────────────────

    def reload(self) -> bool:
        """Re-read all rentals from the store and redraw the list."""
        return self._run(self._vm.refresh())

    def row_count(self) -> int:
        return self._list.count()
