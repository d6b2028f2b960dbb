"""Data models for the itinerary service."""
from .profile import TravelerProfile, FoodPreference, Mobility, Country, COUNTRIES, INTEREST_OPTIONS
from .lookup import DataSource, ConversionResult
from .weather import WeatherSnapshot, CurrentWeather, DailyForecast
from .catalog import CarTier, CarRental, Restaurant, VisaOption
from .stream import TextDelta, StreamEnd, StreamError, StreamEvent

__all__ = [
    "TravelerProfile",
    "FoodPreference",
    "Mobility",
    "Country",
    "COUNTRIES",
    "INTEREST_OPTIONS",
    "DataSource",
    "ConversionResult",
    "WeatherSnapshot",
    "CurrentWeather",
    "DailyForecast",
    "CarTier",
    "CarRental",
    "Restaurant",
    "VisaOption",
    "TextDelta",
    "StreamEnd",
    "StreamError",
    "StreamEvent",
]
