"""Tests for donation service."""

import random
from datetime import datetime

import pytest

from food_rescue.services.donations import DonationService
from food_rescue.services.synthetic import (
    DEFAULT_DONATION_COUNT,
    SyntheticDonationGenerator,
)
from tests.conftest import InMemoryDonationRepository, make_donation


def _service() -> DonationService:
    return DonationService(
        repository=InMemoryDonationRepository(),
        generator=SyntheticDonationGenerator(rng=random.Random(3)),
    )


def test_seed_persists_generated_donations() -> None:
    service = _service()

    created_ids = service.seed(4)

    assert created_ids == [1, 2, 3, 4]
    assert len(service.list_donations()) == 4


def test_seed_rejects_negative_count_before_writing() -> None:
    service = _service()

    with pytest.raises(ValueError):
        service.seed(-3)
    assert service.list_donations() == []


def test_mark_picked_up_sets_flag() -> None:
    service = _service()
    donation_id = service.create_donation(make_donation())

    updated = service.mark_picked_up(donation_id)

    assert updated is not None
    assert updated.is_picked_up is True
    assert service.get_donation(donation_id).is_picked_up is True


def test_mark_picked_up_missing_returns_none() -> None:
    assert _service().mark_picked_up(77) is None


def test_negative_quantity_is_rejected() -> None:
    with pytest.raises(ValueError):
        make_donation(quantity=-1)


def test_naive_donation_date_is_rejected() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        make_donation(donation_date=datetime(2026, 10, 1, 9, 30))


def test_seed_defaults_to_ten_donations() -> None:
    service = _service()

    assert len(service.seed()) == DEFAULT_DONATION_COUNT == 10
