"""In-memory store for food image analysis results."""

import json
import logging
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import TypeAdapter, ValidationError

from food_rescue.domain.analysis import FoodAnalysisResult, FoodItem, ItemTable

logger = logging.getLogger(__name__)

_ITEM_LIST = TypeAdapter(list[FoodItem])


@dataclass
class FoodAnalysisStore:
    """Append-only history of analysis results, cleared only in bulk."""

    _results: list[FoodAnalysisResult] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def results(self) -> tuple[FoodAnalysisResult, ...]:
        """Return a read-only snapshot of the results in insertion order."""
        with self._lock:
            return tuple(self._results)

    def add(
        self, image_base64: str, caption: str, item_table: str = ""
    ) -> FoodAnalysisResult:
        """Record a new analysis result and return it."""
        result = FoodAnalysisResult(
            id=uuid4(),
            image_base64=image_base64,
            caption=caption,
            item_table=item_table,
            created_at=datetime.now(tz=UTC),
            items=parse_item_table(item_table),
        )
        with self._lock:
            self._results.append(result)
        logger.info(
            "Stored analysis %s with %s detected items", result.id, len(result.items)
        )
        return result

    def get(self, analysis_id: UUID) -> FoodAnalysisResult | None:
        """Return an analysis result by id, if present."""
        with self._lock:
            for result in self._results:
                if result.id == analysis_id:
                    return result
        return None

    def find_item(self, analysis_id: UUID, product: str) -> FoodItem | None:
        """Return the named item of an analysis result, matched case-insensitively."""
        result = self.get(analysis_id)
        if result is None:
            return None
        wanted = product.strip().casefold()
        for item in result.items:
            if item.name.strip().casefold() == wanted:
                return item
        return None

    def clear(self) -> None:
        """Remove every stored result."""
        with self._lock:
            count = len(self._results)
            self._results.clear()
        logger.info("Cleared %s analysis results", count)


def parse_item_table(item_table: str) -> tuple[FoodItem, ...]:
    """Parse a JSON item table into food items.

    Accepts either a JSON array of item objects or an object with an
    ``items`` array. Tables that cannot be parsed yield no items.
    """
    if not item_table.strip():
        return ()
    try:
        payload = json.loads(item_table)
        if isinstance(payload, dict):
            return tuple(ItemTable.model_validate(payload).items)
        return tuple(_ITEM_LIST.validate_python(payload))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Could not parse analysis item table: %s", exc)
        return ()
