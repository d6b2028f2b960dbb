"""
Local Data Service.
Loads the read-only JSON datasets shipped in saudi_trip/resources/data/.
"""
import json
import logging
import os
from typing import Any

from ..models.catalog import Restaurant, VisaOption

logger = logging.getLogger(__name__)


class LocalDataService:
    """Restaurants, cultural tips and visa guidance from local JSON files."""

    def __init__(self, base_path: str = None):
        self.base_path = base_path or os.path.join(
            os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "resources", "data"
        )
        self._cache: dict[str, Any] = {}

    def _load_json(self, filename: str) -> Any:
        """Load a JSON resource file once; the datasets never change at runtime."""
        if filename not in self._cache:
            path = os.path.join(self.base_path, filename)
            with open(path, "r", encoding="utf-8") as f:
                self._cache[filename] = json.load(f)
            logger.debug(f"Loaded dataset {path}")
        return self._cache[filename]

    def get_restaurants(self) -> list[Restaurant]:
        return [Restaurant(**r) for r in self._load_json("restaurants.json")]

    def get_cultural_tips(self) -> list[str]:
        return list(self._load_json("cultural_tips.json"))

    def get_visa_guidance(self) -> dict[str, VisaOption]:
        return {
            key: VisaOption(**value)
            for key, value in self._load_json("visa_guidance.json").items()
        }


# Global instance
local_data = LocalDataService()
