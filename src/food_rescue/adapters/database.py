"""Relational store connection factory and schema."""

import logging
from dataclasses import dataclass

from sqlalchemy import (
    Boolean,
    Column,
    Connection,
    DateTime,
    Engine,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
)
from sqlalchemy.engine import make_url
from sqlalchemy.pool import NullPool

from food_rescue.config import CONNECTION_STRING_NAME, ConfigurationError

logger = logging.getLogger(__name__)

metadata = MetaData()

food_donations = Table(
    "FoodDonations",
    metadata,
    Column("Id", Integer, primary_key=True, autoincrement=True),
    Column("DonorName", String(200), nullable=False),
    Column("FoodType", String(100), nullable=False),
    Column("Quantity", Integer, nullable=False),
    Column("Unit", String(50), nullable=False),
    Column("DonationDate", DateTime(timezone=True), nullable=False),
    Column("PickupLocation", String(500), nullable=False),
    Column("IsPickedUp", Boolean, nullable=False, default=False),
)


@dataclass
class SqlConnectionFactory:
    """Produces a fresh database connection per call."""

    engine: Engine

    @classmethod
    def create(
        cls, connection_string: str | None, timeout_seconds: float = 30.0
    ) -> "SqlConnectionFactory":
        """Create a factory, failing fast when the connection string is absent."""
        if not connection_string or not connection_string.strip():
            raise ConfigurationError(
                f"Connection string '{CONNECTION_STRING_NAME}' not found."
            )
        url = make_url(connection_string)
        connect_args: dict[str, object] = {}
        if url.get_backend_name() == "sqlite":
            connect_args = {"check_same_thread": False, "timeout": timeout_seconds}
        engine = create_engine(url, poolclass=NullPool, connect_args=connect_args)
        return cls(engine=engine)

    def create_connection(self) -> Connection:
        """Return a new connection; the caller must close it."""
        logger.debug("Creating database connection")
        return self.engine.connect()

    def create_schema(self) -> None:
        """Create the donation table if it does not exist."""
        metadata.create_all(self.engine)

    def dispose(self) -> None:
        """Release engine resources."""
        self.engine.dispose()
