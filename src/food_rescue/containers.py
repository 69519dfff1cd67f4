"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_rescue.adapters.database import SqlConnectionFactory
from food_rescue.adapters.openai_vision_client import OpenAIVisionClient
from food_rescue.adapters.sql_donation_repository import SqlFoodDonationRepository
from food_rescue.config import Settings
from food_rescue.services.analysis import FoodAnalysisStore
from food_rescue.services.donations import DonationService
from food_rescue.services.reservations import ReservationTracker
from food_rescue.services.synthetic import SyntheticDonationGenerator
from food_rescue.services.vision import FoodImageAnalyzer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    donation_service: DonationService
    analysis_store: FoodAnalysisStore
    reservation_tracker: ReservationTracker
    image_analyzer: FoodImageAnalyzer | None
    prepare_resources: Callable[[], None]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    connection_factory = SqlConnectionFactory.create(
        resolved_settings.food_rescue_db,
        timeout_seconds=resolved_settings.database_timeout_seconds,
    )
    donation_service = DonationService(
        repository=SqlFoodDonationRepository(connection_factory),
        generator=SyntheticDonationGenerator(),
    )
    analysis_store = FoodAnalysisStore()
    vision_client: OpenAIVisionClient | None = None
    image_analyzer: FoodImageAnalyzer | None = None
    if resolved_settings.openai_api_key:
        vision_client = OpenAIVisionClient.create(resolved_settings.openai_api_key)
        image_analyzer = FoodImageAnalyzer(
            client=vision_client,
            analysis_store=analysis_store,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        )

    def prepare_resources() -> None:
        connection_factory.create_schema()
        if resolved_settings.seed_donation_count > 0:
            donation_service.seed(resolved_settings.seed_donation_count)

    async def close_resources() -> None:
        if vision_client is not None:
            await vision_client.close()
        connection_factory.dispose()

    return AppContainer(
        settings=resolved_settings,
        donation_service=donation_service,
        analysis_store=analysis_store,
        reservation_tracker=ReservationTracker(),
        image_analyzer=image_analyzer,
        prepare_resources=prepare_resources,
        close_resources=close_resources,
    )
