"""Tests for synthetic donation generation."""

from datetime import UTC, datetime, timedelta

import pytest
from faker import Faker

from food_rescue.services.synthetic import (
    FOOD_TYPES,
    MAX_GENERATED_DONATIONS,
    UNITS,
    SyntheticDonationGenerator,
)


def test_generate_returns_requested_count() -> None:
    assert len(SyntheticDonationGenerator().generate(25)) == 25


def test_generate_defaults_to_ten() -> None:
    assert len(SyntheticDonationGenerator().generate()) == 10


def test_generate_zero_returns_empty_batch() -> None:
    assert SyntheticDonationGenerator().generate(0) == []


def test_generate_assigns_sequential_ids_from_one() -> None:
    donations = SyntheticDonationGenerator().generate(20)

    assert [donation.id for donation in donations] == list(range(1, 21))


def test_generate_produces_valid_data() -> None:
    donations = SyntheticDonationGenerator().generate(50)

    for donation in donations:
        assert donation.donor_name.strip()
        assert donation.food_type in FOOD_TYPES
        assert 1 <= donation.quantity <= 100
        assert donation.unit in UNITS
        assert donation.pickup_location.strip()
        assert isinstance(donation.is_picked_up, bool)


def test_generate_dates_fall_within_last_thirty_days() -> None:
    now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
    generator = SyntheticDonationGenerator(clock=lambda: now)

    donations = generator.generate(100)

    for donation in donations:
        assert now - timedelta(days=30) <= donation.donation_date <= now


def test_seeded_generators_produce_identical_batches() -> None:
    now = datetime(2026, 10, 19, tzinfo=UTC)
    first = SyntheticDonationGenerator.seeded(7, clock=lambda: now)
    second = SyntheticDonationGenerator.seeded(7, clock=lambda: now)

    assert first.generate(5) == second.generate(5)


def test_donor_names_and_addresses_come_from_faker() -> None:
    generator = SyntheticDonationGenerator.seeded(11)
    expected = Faker()
    expected.seed_instance(11)

    donation = generator.generate(1)[0]

    assert donation.donor_name == expected.company()
    assert donation.pickup_location == expected.address().replace("\n", ", ")
    assert "\n" not in donation.pickup_location


def test_generated_dates_are_timezone_aware() -> None:
    for donation in SyntheticDonationGenerator().generate(5):
        assert donation.donation_date.tzinfo is not None


@pytest.mark.parametrize("count", [-1, MAX_GENERATED_DONATIONS + 1])
def test_generate_rejects_out_of_range_count(count) -> None:
    with pytest.raises(ValueError):
        SyntheticDonationGenerator().generate(count)


@pytest.mark.parametrize("count", ["10", 2.5, True])
def test_generate_rejects_non_integer_count(count) -> None:
    with pytest.raises(ValueError):
        SyntheticDonationGenerator().generate(count)
