"""Donation catalog endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from food_rescue.api.auth import current_user, require_developer
from food_rescue.api.models import DonationPayload
from food_rescue.services.synthetic import DEFAULT_DONATION_COUNT

if TYPE_CHECKING:
    from food_rescue.containers import AppContainer
    from food_rescue.domain.donations import FoodDonation

router = APIRouter(
    prefix="/donations", tags=["donations"], dependencies=[Depends(current_user)]
)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("")
async def list_donations(request: Request) -> dict[str, object]:
    """Return all donations."""
    donations = _container(request).donation_service.list_donations()
    return {"donations": [_donation_to_dict(item) for item in donations]}


@router.get("/{donation_id}")
async def get_donation(donation_id: int, request: Request) -> dict[str, object]:
    """Return a single donation."""
    donation = _container(request).donation_service.get_donation(donation_id)
    if donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _donation_to_dict(donation)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_donation(
    payload: DonationPayload, request: Request
) -> dict[str, object]:
    """Create a donation and return its id."""
    donation_id = _container(request).donation_service.create_donation(
        payload.to_domain()
    )
    return {"id": donation_id}


@router.put("/{donation_id}")
async def update_donation(
    donation_id: int, payload: DonationPayload, request: Request
) -> dict[str, object]:
    """Replace an existing donation."""
    donation = payload.to_domain(donation_id)
    if not _container(request).donation_service.update_donation(donation):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _donation_to_dict(donation)


@router.post("/{donation_id}/pickup")
async def mark_picked_up(donation_id: int, request: Request) -> dict[str, object]:
    """Flag a donation as picked up."""
    donation = _container(request).donation_service.mark_picked_up(donation_id)
    if donation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _donation_to_dict(donation)


@router.delete("/{donation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_donation(donation_id: int, request: Request) -> None:
    """Delete a donation."""
    if not _container(request).donation_service.delete_donation(donation_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.post("/seed", dependencies=[Depends(require_developer)])
async def seed_donations(
    request: Request, count: int = DEFAULT_DONATION_COUNT
) -> dict[str, object]:
    """Persist a batch of synthetic donations."""
    try:
        created_ids = _container(request).donation_service.seed(count)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return {"ids": created_ids}


def _donation_to_dict(donation: FoodDonation) -> dict[str, object]:
    return asdict(donation)
