"""Domain models for reservations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodReservation:
    """A user's claim on a quantity of an analyzed food item."""

    analysis_id: UUID
    product: str
    reserved_amount: int
    user_id: str
    reserved_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
