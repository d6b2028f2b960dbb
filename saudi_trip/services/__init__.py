"""Services for the itinerary service."""
from .llm_client import LLMClient, build_llm_client
from .currency import CurrencyConverter
from .weather import WeatherService
from .relay import ItineraryRelay, RelayState

__all__ = [
    "LLMClient",
    "build_llm_client",
    "CurrencyConverter",
    "WeatherService",
    "ItineraryRelay",
    "RelayState",
]
