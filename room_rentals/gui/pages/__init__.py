"""Individual screens of the rentals GUI."""

from room_rentals.gui.pages.rental_dialog import RentalDialog
from room_rentals.gui.pages.rental_list import RentalListPage

__all__ = ["RentalDialog", "RentalListPage"]
