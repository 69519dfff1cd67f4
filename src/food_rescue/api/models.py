"""Request payloads for the HTTP API."""

from datetime import UTC, datetime
from uuid import UUID

from pydantic import AwareDatetime, BaseModel, Field

from food_rescue.domain.donations import FoodDonation


class DonationPayload(BaseModel):
    """Donor-facing form data for a donation."""

    donor_name: str = Field(min_length=1)
    food_type: str = Field(min_length=1)
    quantity: int = Field(ge=0)
    unit: str = Field(min_length=1)
    donation_date: AwareDatetime | None = None
    pickup_location: str = Field(min_length=1)
    is_picked_up: bool = False

    def to_domain(self, donation_id: int = 0) -> FoodDonation:
        """Convert the payload into a donation record."""
        return FoodDonation(
            id=donation_id,
            donor_name=self.donor_name,
            food_type=self.food_type,
            quantity=self.quantity,
            unit=self.unit,
            donation_date=self.donation_date or datetime.now(tz=UTC),
            pickup_location=self.pickup_location,
            is_picked_up=self.is_picked_up,
        )


class AnalysisPayload(BaseModel):
    """Analysis triple supplied by an external collaborator."""

    image_base64: str
    caption: str
    item_table: str = ""


class PhotoPayload(BaseModel):
    """Base64 encoded food photo to analyze."""

    image_base64: str = Field(min_length=1)


class ReservationPayload(BaseModel):
    """Reservation request for an analyzed food item."""

    analysis_id: UUID
    product: str = Field(min_length=1)
    reserved_amount: int = Field(ge=1)
