"""Synthetic donation data for seeding and demos."""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from faker import Faker

from food_rescue.domain.donations import FoodDonation

logger = logging.getLogger(__name__)

DEFAULT_DONATION_COUNT = 10
MAX_GENERATED_DONATIONS = 10_000
DONATION_WINDOW = timedelta(days=30)

FOOD_TYPES = (
    "Bread",
    "Vegetables",
    "Fruits",
    "Dairy",
    "Canned Goods",
    "Prepared Meals",
    "Bakery Items",
    "Meat",
    "Beverages",
)
UNITS = ("kg", "units", "boxes", "bags")


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SyntheticDonationGenerator:
    """Produces plausible but fake donation records.

    ``rng`` drives the catalog fields (type, quantity, unit, date, pickup
    flag); ``faker`` supplies donor names and pickup addresses. Seed both for
    reproducible batches.
    """

    rng: random.Random = field(default_factory=random.Random)
    faker: Faker = field(default_factory=Faker)
    clock: Callable[[], datetime] = _utc_now

    @classmethod
    def seeded(
        cls, seed: int, clock: Callable[[], datetime] = _utc_now
    ) -> "SyntheticDonationGenerator":
        """Create a generator whose output is fully determined by ``seed``."""
        faker = Faker()
        faker.seed_instance(seed)
        return cls(rng=random.Random(seed), faker=faker, clock=clock)

    def generate(self, count: int = DEFAULT_DONATION_COUNT) -> list[FoodDonation]:
        """Generate exactly ``count`` donations with batch-local ids 1..count."""
        if not isinstance(count, int) or isinstance(count, bool):
            raise ValueError("Donation count must be an integer")
        if count < 0 or count > MAX_GENERATED_DONATIONS:
            raise ValueError(
                f"Donation count must be between 0 and {MAX_GENERATED_DONATIONS}"
            )
        logger.info("Generating %s test food donations", count)
        now = self.clock()
        return [self._donation(index + 1, now) for index in range(count)]

    def _donation(self, donation_id: int, now: datetime) -> FoodDonation:
        offset = timedelta(seconds=self.rng.uniform(0, DONATION_WINDOW.total_seconds()))
        return FoodDonation(
            id=donation_id,
            donor_name=self.faker.company(),
            food_type=self.rng.choice(FOOD_TYPES),
            quantity=self.rng.randint(1, 100),
            unit=self.rng.choice(UNITS),
            donation_date=now - offset,
            pickup_location=self.faker.address().replace("\n", ", "),
            is_picked_up=self.rng.random() < 0.5,
        )
