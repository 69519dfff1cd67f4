"""Domain models for food donations."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FoodDonation:
    """A unit of donated food available for pickup."""

    donor_name: str
    food_type: str
    quantity: int
    unit: str
    donation_date: datetime
    pickup_location: str
    is_picked_up: bool = False
    id: int = 0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Donation quantity must not be negative")
        if self.donation_date.tzinfo is None:
            raise ValueError("Donation date must be timezone-aware")
