"""
Entry point: ``python -m room_rentals`` opens the "Rented rooms" window
backed by ./renting_duration.db.
"""

import logging
import sys

from room_rentals.store.db import DEFAULT_DB_PATH, RentalStore

logger = logging.getLogger(__name__)


def main() -> int:
    """Start the GUI. Returns the Qt exit code."""
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    from PyQt6.QtWidgets import QApplication
    from room_rentals.gui.main_window import MainWindow

    app = QApplication(sys.argv)
    store = RentalStore(db_path=DEFAULT_DB_PATH)
    logger.info("Starting rentals GUI with database %s", store.db_path)
    window = MainWindow(store)
    window.show()
    try:
        return app.exec()
    finally:
        store.close()


if __name__ == "__main__":
    sys.exit(main())
