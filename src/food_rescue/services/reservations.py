"""In-memory tracking of food reservations."""

import logging
import threading
from dataclasses import dataclass, field

from food_rescue.domain.reservations import FoodReservation

logger = logging.getLogger(__name__)


@dataclass
class ReservationTracker:
    """Ordered ledger of reservations keyed by user identity.

    Reserved amounts are recorded as given. They are not checked against the
    detected quantity of the referenced analysis item, and stock is never
    decremented.
    """

    _reservations: list[FoodReservation] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def reservations(self) -> tuple[FoodReservation, ...]:
        """Return a snapshot of every reservation in insertion order."""
        with self._lock:
            return tuple(self._reservations)

    def add_reservation(self, reservation: FoodReservation) -> None:
        """Record a reservation; its timestamp is kept as constructed."""
        with self._lock:
            self._reservations.append(reservation)
        logger.info(
            "Reserved %s of %s from analysis %s",
            reservation.reserved_amount,
            reservation.product,
            reservation.analysis_id,
        )

    def view_reservations(self, user_id: str) -> list[FoodReservation]:
        """Return reservations made by ``user_id`` in insertion order."""
        with self._lock:
            return [item for item in self._reservations if item.user_id == user_id]
