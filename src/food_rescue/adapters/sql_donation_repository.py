"""SQL-backed repository for food donations."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import Row, delete, insert, select, update

from food_rescue.adapters.database import SqlConnectionFactory, food_donations
from food_rescue.domain.donations import FoodDonation
from food_rescue.services.donations import FoodDonationRepository

logger = logging.getLogger(__name__)


@dataclass
class SqlFoodDonationRepository(FoodDonationRepository):
    """Relational implementation for donation persistence."""

    connection_factory: SqlConnectionFactory

    def get_all(self) -> list[FoodDonation]:
        """Return every donation row."""
        logger.debug("Getting all food donations")
        with self.connection_factory.create_connection() as connection:
            rows = connection.execute(select(food_donations)).all()
        return [_parse_row(row) for row in rows]

    def get_by_id(self, donation_id: int) -> FoodDonation | None:
        """Return a donation by id, if present."""
        logger.debug("Getting food donation with id %s", donation_id)
        statement = select(food_donations).where(food_donations.c.Id == donation_id)
        with self.connection_factory.create_connection() as connection:
            row = connection.execute(statement).first()
        if row is None:
            return None
        return _parse_row(row)

    def create(self, donation: FoodDonation) -> int:
        """Insert a donation and return the store-assigned id."""
        logger.info("Creating new food donation from %s", donation.donor_name)
        statement = insert(food_donations).values(**_to_values(donation))
        with self.connection_factory.create_connection() as connection:
            result = connection.execute(statement)
            donation_id = int(result.inserted_primary_key[0])
            connection.commit()
        return donation_id

    def update(self, donation: FoodDonation) -> bool:
        """Replace a donation row; return whether a row was affected."""
        logger.info("Updating food donation with id %s", donation.id)
        statement = (
            update(food_donations)
            .where(food_donations.c.Id == donation.id)
            .values(**_to_values(donation))
        )
        with self.connection_factory.create_connection() as connection:
            affected_rows = connection.execute(statement).rowcount
            connection.commit()
        return affected_rows > 0

    def delete(self, donation_id: int) -> bool:
        """Delete a donation row; return whether a row was affected."""
        logger.info("Deleting food donation with id %s", donation_id)
        statement = delete(food_donations).where(food_donations.c.Id == donation_id)
        with self.connection_factory.create_connection() as connection:
            affected_rows = connection.execute(statement).rowcount
            connection.commit()
        return affected_rows > 0


def _to_values(donation: FoodDonation) -> dict[str, object]:
    return {
        "DonorName": donation.donor_name,
        "FoodType": donation.food_type,
        "Quantity": donation.quantity,
        "Unit": donation.unit,
        "DonationDate": _to_utc(donation.donation_date),
        "PickupLocation": donation.pickup_location,
        "IsPickedUp": donation.is_picked_up,
    }


def _parse_row(row: Row) -> FoodDonation:
    values = row._mapping
    return FoodDonation(
        id=int(values["Id"]),
        donor_name=str(values["DonorName"]),
        food_type=str(values["FoodType"]),
        quantity=int(values["Quantity"]),
        unit=str(values["Unit"]),
        donation_date=_to_utc(values["DonationDate"]),
        pickup_location=str(values["PickupLocation"]),
        is_picked_up=bool(values["IsPickedUp"]),
    )


def _to_utc(value: datetime) -> datetime:
    """Normalize datetimes to UTC; naive values are treated as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
