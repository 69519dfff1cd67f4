"""Food analysis and reservation endpoints."""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from food_rescue.api.auth import CurrentUser, current_user, require_developer
from food_rescue.api.models import AnalysisPayload, PhotoPayload, ReservationPayload
from food_rescue.domain.reservations import FoodReservation
from food_rescue.services.vision import ImageAnalysisError

if TYPE_CHECKING:
    from food_rescue.containers import AppContainer
    from food_rescue.domain.analysis import FoodAnalysisResult

router = APIRouter(tags=["analysis"], dependencies=[Depends(current_user)])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/analysis")
async def list_analysis_results(request: Request) -> dict[str, object]:
    """Return every stored analysis result."""
    results = _container(request).analysis_store.results
    return {"results": [_analysis_to_dict(result) for result in results]}


@router.get("/analysis/{analysis_id}")
async def get_analysis_result(analysis_id: UUID, request: Request) -> dict[str, object]:
    """Return a single analysis result."""
    result = _container(request).analysis_store.get(analysis_id)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _analysis_to_dict(result)


@router.post("/analysis", status_code=status.HTTP_201_CREATED)
async def record_analysis_result(
    payload: AnalysisPayload, request: Request
) -> dict[str, object]:
    """Record an analysis produced elsewhere."""
    result = _container(request).analysis_store.add(
        payload.image_base64, payload.caption, payload.item_table
    )
    return _analysis_to_dict(result)


@router.post("/analysis/photo", status_code=status.HTTP_201_CREATED)
async def analyze_photo(payload: PhotoPayload, request: Request) -> dict[str, object]:
    """Analyze a food photo with the configured vision model."""
    analyzer = _container(request).image_analyzer
    if analyzer is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Image analysis is not configured",
        )
    try:
        image_bytes = base64.b64decode(payload.image_base64, validate=True)
    except binascii.Error as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid base64 image",
        ) from exc
    try:
        result = await analyzer.analyze(image_bytes)
    except ImageAnalysisError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    return _analysis_to_dict(result)


@router.delete(
    "/analysis",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_developer)],
)
async def clear_analysis_results(request: Request) -> None:
    """Remove every stored analysis result."""
    _container(request).analysis_store.clear()


@router.post("/reservations", status_code=status.HTTP_201_CREATED)
async def add_reservation(
    payload: ReservationPayload,
    request: Request,
    user: CurrentUser = Depends(current_user),
) -> dict[str, object]:
    """Reserve an amount of an analyzed food item for the caller."""
    reservation = FoodReservation(
        analysis_id=payload.analysis_id,
        product=payload.product,
        reserved_amount=payload.reserved_amount,
        user_id=user.user_id,
    )
    _container(request).reservation_tracker.add_reservation(reservation)
    return _reservation_to_dict(reservation)


@router.get("/reservations/me")
async def view_my_reservations(
    request: Request, user: CurrentUser = Depends(current_user)
) -> dict[str, object]:
    """Return the caller's reservations in the order they were made."""
    reservations = _container(request).reservation_tracker.view_reservations(
        user.user_id
    )
    return {"reservations": [_reservation_to_dict(item) for item in reservations]}


def _analysis_to_dict(result: FoodAnalysisResult) -> dict[str, object]:
    return {
        "id": str(result.id),
        "image_base64": result.image_base64,
        "caption": result.caption,
        "item_table": result.item_table,
        "created_at": result.created_at.isoformat(),
        "items": [item.model_dump() for item in result.items],
    }


def _reservation_to_dict(reservation: FoodReservation) -> dict[str, object]:
    return {
        "analysis_id": str(reservation.analysis_id),
        "product": reservation.product,
        "reserved_amount": reservation.reserved_amount,
        "user_id": reservation.user_id,
        "reserved_at": reservation.reserved_at.isoformat(),
    }
