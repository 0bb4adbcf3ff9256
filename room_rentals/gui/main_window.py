"""
MainWindow — top-level application window for the rentals GUI.

Hosts a single RentalListPage.  The RentalStore is built once by the
caller and injected here; the window never opens the database itself.
"""

import logging

from PyQt6.QtWidgets import QMainWindow, QWidget

from room_rentals.gui.pages.rental_list import RentalListPage
from room_rentals.gui.viewmodels import RentalListViewModel
from room_rentals.store.db import RentalStore

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Rented rooms"


class MainWindow(QMainWindow):
    """Root window: wires the shared store into the list page and loads it."""

    def __init__(self, store: RentalStore, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(480, 640)

        self._vm = RentalListViewModel(store)
        self._page = RentalListPage(self._vm)
        self.setCentralWidget(self._page)

        self._page.reload()

    @property
    def page(self) -> RentalListPage:
        return self._page
