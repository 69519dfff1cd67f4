"""Models for food image analysis results."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class FoodItem(BaseModel):
    """Single detected food item parsed from an analysis item table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=1,
        validation_alias=AliasChoices("name", "product", "item", "label"),
    )
    quantity: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("quantity", "amount", "count", "qty"),
    )


class ItemTable(BaseModel):
    """Wrapped form of an item table."""

    items: list[FoodItem]


@dataclass(frozen=True)
class FoodAnalysisResult:
    """Outcome of analyzing a submitted food photo."""

    id: UUID
    image_base64: str
    caption: str
    item_table: str
    created_at: datetime
    items: tuple[FoodItem, ...] = ()


class DetectedFoodItem(BaseModel):
    """Food item as reported by the vision model."""

    name: str
    quantity: int


class ImageAnalysis(BaseModel):
    """Structured vision model answer for a food photo."""

    caption: str
    items: list[DetectedFoodItem]
