"""Services for the donation catalog."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from food_rescue.domain.donations import FoodDonation
from food_rescue.services.synthetic import (
    DEFAULT_DONATION_COUNT,
    SyntheticDonationGenerator,
)

logger = logging.getLogger(__name__)


class FoodDonationRepository(Protocol):
    """Persistence interface for food donations."""

    def get_all(self) -> list[FoodDonation]:
        """Return every donation."""

    def get_by_id(self, donation_id: int) -> FoodDonation | None:
        """Return a donation by id, if present."""

    def create(self, donation: FoodDonation) -> int:
        """Insert a donation and return the store-assigned id."""

    def update(self, donation: FoodDonation) -> bool:
        """Replace a donation; return whether a row was affected."""

    def delete(self, donation_id: int) -> bool:
        """Delete a donation; return whether a row was affected."""


@dataclass
class DonationService:
    """Application service for donation catalog actions."""

    repository: FoodDonationRepository
    generator: SyntheticDonationGenerator

    def list_donations(self) -> list[FoodDonation]:
        """Return all donations."""
        return self.repository.get_all()

    def get_donation(self, donation_id: int) -> FoodDonation | None:
        """Return a donation by id."""
        return self.repository.get_by_id(donation_id)

    def create_donation(self, donation: FoodDonation) -> int:
        """Persist a new donation and return its id."""
        return self.repository.create(donation)

    def update_donation(self, donation: FoodDonation) -> bool:
        """Replace an existing donation."""
        return self.repository.update(donation)

    def delete_donation(self, donation_id: int) -> bool:
        """Delete a donation."""
        return self.repository.delete(donation_id)

    def mark_picked_up(self, donation_id: int) -> FoodDonation | None:
        """Flag a donation as picked up and return the updated record."""
        donation = self.repository.get_by_id(donation_id)
        if donation is None:
            return None
        picked_up = replace(donation, is_picked_up=True)
        if not self.repository.update(picked_up):
            return None
        return picked_up

    def seed(self, count: int = DEFAULT_DONATION_COUNT) -> list[int]:
        """Generate synthetic donations and persist them, returning new ids."""
        donations = self.generator.generate(count)
        created_ids = [self.repository.create(donation) for donation in donations]
        logger.info("Seeded %s synthetic food donations", len(created_ids))
        return created_ids
