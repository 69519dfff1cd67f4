"""OpenAI Responses API client for food photo analysis."""

import logging
from dataclasses import dataclass

from openai import APIError, AsyncOpenAI
from pydantic import ValidationError

from food_rescue.domain.analysis import ImageAnalysis
from food_rescue.services.vision import ImageAnalysisError, VisionClient

logger = logging.getLogger(__name__)


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client parsing OpenAI answers straight into ``ImageAnalysis``."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIVisionClient":
        """Create an OpenAI vision client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def analyze_photo(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        prompt: str,
    ) -> ImageAnalysis:
        """Ask the model to caption the photo and list its food items."""
        options: dict[str, object] = {"store": store}
        if reasoning_effort:
            options["reasoning"] = {"effort": reasoning_effort}
        try:
            response = await self.client.responses.parse(
                model=model,
                input=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "input_text", "text": prompt},
                            {"type": "input_image", "image_url": image_data_url},
                        ],
                    }
                ],
                text_format=ImageAnalysis,
                **options,
            )
        except APIError as exc:
            logger.warning("OpenAI food analysis request failed: %s", exc)
            raise ImageAnalysisError(f"Vision request failed: {exc}") from exc
        except ValidationError as exc:
            raise ImageAnalysisError(
                f"Vision model answer is malformed: {exc}"
            ) from exc
        if response.output_parsed is None:
            raise ImageAnalysisError("Vision model returned no food analysis")
        return response.output_parsed

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
