"""Booking repository on top of a list store.

Bookings are kept newest first under the ``bookings`` key, in the
camelCase record shape produced by ``Booking.to_record``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.models import Booking
from ...ports.storage import BOOKINGS_KEY, ListStorePort


@dataclass
class BookingRepository:
    """Persists confirmed bookings.

    Attributes:
        store: Underlying list store
        key: Storage key for the booking list
    """

    store: ListStorePort
    key: str = BOOKINGS_KEY
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add(self, booking: Booking) -> None:
        """Prepend a booking to the stored list."""
        previous = self.store.load(self.key)
        self.store.save(self.key, [booking.to_record(), *previous])
        self._logger.info(
            "Booking stored",
            extra={"booking_id": booking.id, "package_id": booking.package_id},
        )

    def list(self) -> List[Booking]:
        """Return stored bookings, newest first.

        Records that cannot be parsed are skipped with a warning.
        """
        bookings: List[Booking] = []
        for record in self.store.load(self.key):
            try:
                bookings.append(Booking.from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                self._logger.warning(
                    "Skipping malformed booking record",
                    extra={"error": str(e)},
                )
        return bookings

    def get(self, booking_id: str) -> Optional[Booking]:
        return next((b for b in self.list() if b.id == booking_id), None)
