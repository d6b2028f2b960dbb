"""
Weather Lookup.
Geocodes a city with Open-Meteo, fetches its forecast and always hands back a
usable snapshot, falling back to a fixed illustrative forecast on failure.
"""
import httpx
import json
import logging
from datetime import date
from typing import Optional
from urllib.parse import quote

from ..models.lookup import DataSource
from ..models.weather import CurrentWeather, DailyForecast, WeatherSnapshot

logger = logging.getLogger(__name__)

FORECAST_DAYS = 5
CHART_BASE_URL = "https://quickchart.io/chart"


class CityNotFoundError(Exception):
    """The geocoder returned no results for a city name."""


def classify_weather_code(code: int) -> str:
    """Map a WMO weather code to a short condition label."""
    if code == 0:
        return "Clear"
    if code <= 3:
        return "Partly Cloudy"
    if code <= 48:
        return "Foggy"
    if code <= 67:
        return "Rainy"
    if code <= 77:
        return "Snowy"
    if code <= 82:
        return "Rainy"
    if code <= 86:
        return "Snowy"
    return "Stormy"


def format_day_label(value: str) -> str:
    """'2025-10-19' -> 'Sun, Oct 19'."""
    d = date.fromisoformat(value)
    return f"{d.strftime('%a, %b')} {d.day}"


def build_chart_url(city: str, labels: list[str], highs: list[float]) -> str:
    """QuickChart line chart of the daily highs."""
    chart_config = {
        "type": "line",
        "data": {
            "labels": labels,
            "datasets": [{
                "label": "Temperature (°C)",
                "data": highs,
                "borderColor": "#006C35",
                "backgroundColor": "rgba(0, 108, 53, 0.1)",
                "tension": 0.4,
            }],
        },
        "options": {
            "responsive": True,
            "plugins": {"title": {"display": True, "text": f"{city} Weather Forecast"}},
            "scales": {
                "y": {
                    "beginAtZero": False,
                    "title": {"display": True, "text": "Temperature (°C)"},
                }
            },
        },
    }
    encoded = quote(json.dumps(chart_config, separators=(",", ":")), safe="")
    return f"{CHART_BASE_URL}?c={encoded}&width=400&height=200"


def fallback_snapshot() -> WeatherSnapshot:
    """Fixed forecast used whenever the live lookup fails."""
    forecast = [
        DailyForecast(date="Today", high=32, low=22, condition="Sunny", precipitation=0),
        DailyForecast(date="Tomorrow", high=30, low=20, condition="Partly Cloudy", precipitation=10),
        DailyForecast(date="Day 3", high=33, low=24, condition="Sunny", precipitation=0),
        DailyForecast(date="Day 4", high=31, low=21, condition="Sunny", precipitation=5),
        DailyForecast(date="Day 5", high=29, low=19, condition="Cloudy", precipitation=20),
    ]
    return WeatherSnapshot(
        current=CurrentWeather(temperature=28, condition="Sunny"),
        forecast=forecast,
        chart_url=build_chart_url("Riyadh", [f.date for f in forecast], [f.high for f in forecast]),
        source=DataSource.FALLBACK,
    )


class WeatherService:
    """Client for the Open-Meteo geocoding and forecast APIs."""

    def __init__(
        self,
        geocoding_url: str,
        forecast_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.geocoding_url = geocoding_url
        self.forecast_url = forecast_url
        self.timeout = timeout
        self._transport = transport

    async def get_forecast(self, city: str) -> WeatherSnapshot:
        """Fetch current weather and a 5-day forecast. Never raises."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                lat, lon = await self._geocode(client, city)
                data = await self._fetch_forecast(client, lat, lon)
            return self._parse_forecast(city, data)
        except (
            httpx.HTTPError, CityNotFoundError, AttributeError, KeyError, IndexError, TypeError, ValueError
        ) as e:
            logger.warning(f"Weather fetch error for {city!r}, using fallback forecast: {e}")
            return fallback_snapshot()

    async def _geocode(self, client: httpx.AsyncClient, city: str) -> tuple[float, float]:
        params = {"name": city, "count": 1, "language": "en", "format": "json"}
        response = await client.get(self.geocoding_url, params=params)
        response.raise_for_status()
        results = response.json().get("results") or []
        if not results:
            raise CityNotFoundError(f"City not found: {city}")
        return float(results[0]["latitude"]), float(results[0]["longitude"])

    async def _fetch_forecast(self, client: httpx.AsyncClient, lat: float, lon: float) -> dict:
        params = {
            "latitude": lat,
            "longitude": lon,
            "current_weather": "true",
            "daily": "temperature_2m_max,temperature_2m_min,precipitation_probability_max,weather_code",
            "timezone": "Asia/Riyadh",
            "forecast_days": 7,
        }
        response = await client.get(self.forecast_url, params=params)
        response.raise_for_status()
        return response.json()

    def _parse_forecast(self, city: str, data: dict) -> WeatherSnapshot:
        current = data["current_weather"]
        daily = data["daily"]
        dates = daily["time"][:FORECAST_DAYS]
        highs = daily["temperature_2m_max"]
        lows = daily["temperature_2m_min"]
        precipitation = daily.get("precipitation_probability_max") or []
        codes = daily.get("weather_code") or []

        forecast = []
        for i, day in enumerate(dates):
            condition = classify_weather_code(int(codes[i])) if i < len(codes) else "Sunny"
            forecast.append(DailyForecast(
                date=format_day_label(day),
                high=highs[i],
                low=lows[i],
                condition=condition,
                precipitation=(precipitation[i] if i < len(precipitation) else None) or 0,
            ))

        return WeatherSnapshot(
            current=CurrentWeather(
                temperature=current["temperature"],
                condition=classify_weather_code(int(current["weathercode"])),
            ),
            forecast=forecast,
            chart_url=build_chart_url(city, [f.date for f in forecast], [f.high for f in forecast]),
            source=DataSource.LIVE,
        )
