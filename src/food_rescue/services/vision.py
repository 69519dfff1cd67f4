"""Food photo analysis using LLM vision."""

import base64
import json
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from food_rescue.domain.analysis import FoodAnalysisResult, FoodItem, ImageAnalysis
from food_rescue.services.analysis import FoodAnalysisStore

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = (
    "Describe the food in the image in one or two sentences. "
    "Then list each distinct food item with a short name and the number of "
    "units or portions visible."
)

_IMAGE_SIGNATURES = (
    (0, b"\xff\xd8\xff", "image/jpeg"),
    (0, b"\x89PNG\r\n\x1a\n", "image/png"),
    (8, b"WEBP", "image/webp"),
    (0, b"GIF8", "image/gif"),
)


class ImageAnalysisError(RuntimeError):
    """Raised when the vision collaborator fails or answers unusably."""


class VisionClient(Protocol):
    """Interface for LLM food photo analysis."""

    async def analyze_photo(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        prompt: str,
    ) -> ImageAnalysis:
        """Return the caption and detected items for a photo."""


@dataclass
class FoodImageAnalyzer:
    """Analyzes food photos and records the outcome in the analysis store."""

    client: VisionClient
    analysis_store: FoodAnalysisStore
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze(self, image_bytes: bytes) -> FoodAnalysisResult:
        """Caption a photo, tabulate its items and store the result."""
        image_base64 = base64.b64encode(image_bytes).decode("utf-8")
        analysis = await self.client.analyze_photo(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            image_data_url=f"data:{image_mime_type(image_bytes)};base64,{image_base64}",
            prompt=ANALYSIS_PROMPT,
        )
        item_table = _to_item_table(analysis)
        logger.info("Vision model detected %s food items", len(analysis.items))
        return self.analysis_store.add(image_base64, analysis.caption, item_table)


def _to_item_table(analysis: ImageAnalysis) -> str:
    """Serialize detected items, rejecting ones the store cannot reserve against."""
    try:
        items = [
            FoodItem(name=item.name, quantity=item.quantity) for item in analysis.items
        ]
    except ValidationError as exc:
        raise ImageAnalysisError(f"Vision model returned invalid items: {exc}") from exc
    return json.dumps([item.model_dump() for item in items])


def image_mime_type(image_bytes: bytes) -> str:
    """Return the MIME type for a photo by its file signature, JPEG if unknown."""
    for offset, signature, mime_type in _IMAGE_SIGNATURES:
        if image_bytes[offset : offset + len(signature)] == signature:
            return mime_type
    return "image/jpeg"
