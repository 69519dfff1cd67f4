"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

import pytest

from food_rescue.adapters.database import SqlConnectionFactory
from food_rescue.adapters.sql_donation_repository import SqlFoodDonationRepository
from food_rescue.config import Settings
from food_rescue.containers import AppContainer
from food_rescue.domain.analysis import DetectedFoodItem, ImageAnalysis
from food_rescue.domain.donations import FoodDonation
from food_rescue.services.analysis import FoodAnalysisStore
from food_rescue.services.donations import DonationService, FoodDonationRepository
from food_rescue.services.reservations import ReservationTracker
from food_rescue.services.synthetic import SyntheticDonationGenerator
from food_rescue.services.vision import FoodImageAnalyzer, VisionClient


@dataclass
class InMemoryDonationRepository(FoodDonationRepository):
    """In-memory donation repository for tests."""

    rows: dict[int, FoodDonation] = field(default_factory=dict)
    next_id: int = 1

    def get_all(self) -> list[FoodDonation]:
        return list(self.rows.values())

    def get_by_id(self, donation_id: int) -> FoodDonation | None:
        return self.rows.get(donation_id)

    def create(self, donation: FoodDonation) -> int:
        donation_id = self.next_id
        self.next_id += 1
        self.rows[donation_id] = replace(donation, id=donation_id)
        return donation_id

    def update(self, donation: FoodDonation) -> bool:
        if donation.id not in self.rows:
            return False
        self.rows[donation.id] = donation
        return True

    def delete(self, donation_id: int) -> bool:
        return self.rows.pop(donation_id, None) is not None


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed payload."""

    analysis: ImageAnalysis = field(
        default_factory=lambda: ImageAnalysis(
            caption="Two loaves of bread and a crate of apples.",
            items=[
                DetectedFoodItem(name="bread", quantity=2),
                DetectedFoodItem(name="apples", quantity=12),
            ],
        )
    )
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def analyze_photo(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        prompt: str,
    ) -> ImageAnalysis:
        self.calls.append(image_data_url)
        if self.error is not None:
            raise self.error
        return self.analysis


def make_donation(**overrides: object) -> FoodDonation:
    values: dict[str, object] = {
        "donor_name": "Baker LLC",
        "food_type": "Bread",
        "quantity": 12,
        "unit": "boxes",
        "donation_date": datetime(2026, 10, 1, 9, 30, 15, 250000, tzinfo=UTC),
        "pickup_location": "12 Mill Street, Riverton 40211",
        "is_picked_up": False,
    }
    values.update(overrides)
    return FoodDonation(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        food_rescue_db=f"sqlite:///{tmp_path / 'food_rescue.db'}",
        dev_auth_enabled=True,
        dev_user_name="Developer",
        dev_user_roles="Developer",
        openai_api_key=None,
    )


@pytest.fixture
def connection_factory(settings: Settings):
    factory = SqlConnectionFactory.create(settings.food_rescue_db)
    factory.create_schema()
    yield factory
    factory.dispose()


@pytest.fixture
def sql_repository(
    connection_factory: SqlConnectionFactory,
) -> SqlFoodDonationRepository:
    return SqlFoodDonationRepository(connection_factory)


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def container(
    settings: Settings,
    sql_repository: SqlFoodDonationRepository,
    vision_client: FakeVisionClient,
) -> AppContainer:
    analysis_store = FoodAnalysisStore()
    donation_service = DonationService(
        repository=sql_repository,
        generator=SyntheticDonationGenerator(),
    )
    image_analyzer = FoodImageAnalyzer(
        client=vision_client,
        analysis_store=analysis_store,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
    )

    def prepare_resources() -> None:
        sql_repository.connection_factory.create_schema()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        donation_service=donation_service,
        analysis_store=analysis_store,
        reservation_tracker=ReservationTracker(),
        image_analyzer=image_analyzer,
        prepare_resources=prepare_resources,
        close_resources=close_resources,
    )
