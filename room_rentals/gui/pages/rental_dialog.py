"""
RentalDialog — modal form used both to rent a room and to edit a rental.

Layout
──────
  ┌──────────── Rent a room ────────────┐
  │ Room number:      [_______________] │
  │ Client name:      [_______________] │
  │ Renting duration: [_______________] │
  │ <validation message>                │
  │                    [Add] [Cancel]   │
  └─────────────────────────────────────┘
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from room_rentals.exceptions import ValidationError
from room_rentals.gui.viewmodels import parse_form
from room_rentals.store.models import RentalRecord

__all__ = ["RentalDialog"]

logger = logging.getLogger(__name__)

TITLE_ADD  = "Rent a room"
TITLE_EDIT = "Edit Item"


class RentalDialog(QDialog):
    """Collects room number, client name and duration; pre-filled when editing."""

    def __init__(self, parent: QWidget = None, record: Optional[RentalRecord] = None) -> None:
        super().__init__(parent)
        self._record = record
        self.setWindowTitle(TITLE_EDIT if record else TITLE_ADD)
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self._room_edit = QLineEdit()
        self._name_edit = QLineEdit()
        self._days_edit = QLineEdit()
        form.addRow("Room number:", self._room_edit)
        form.addRow("Client name:", self._name_edit)
        form.addRow("Renting duration:", self._days_edit)
        layout.addLayout(form)

        if self._record is not None:
            self._room_edit.setText(str(self._record.room_number))
            self._name_edit.setText(self._record.client_name)
            self._days_edit.setText(str(self._record.renting_duration))

        self._error_label = QLabel("")
        self._error_label.setStyleSheet("color: #c0392b;")
        layout.addWidget(self._error_label)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._ok_btn     = QPushButton("Save" if self._record else "Add")
        self._cancel_btn = QPushButton("Cancel")
        self._ok_btn.clicked.connect(self._on_ok)
        self._cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(self._ok_btn)
        btn_row.addWidget(self._cancel_btn)
        layout.addLayout(btn_row)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_ok(self) -> None:
        try:
            parse_form(*self.values())
        except ValidationError as exc:
            # Keep the dialog open until the input is usable
            self._error_label.setText(str(exc))
            return
        self.accept()

    # ── Public API ─────────────────────────────────────────────────────────

    def values(self) -> tuple[str, str, str]:
        """Return the raw (room number, client name, duration) text."""
        return (
            self._room_edit.text(),
            self._name_edit.text(),
            self._days_edit.text(),
        )
