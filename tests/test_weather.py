"""Tests for the weather lookup."""
import httpx
import pytest

from saudi_trip.models.lookup import DataSource
from saudi_trip.services.weather import (
    WeatherService,
    classify_weather_code,
    fallback_snapshot,
    format_day_label,
)

GEOCODING_URL = "https://geo.test/v1/search"
FORECAST_URL = "https://meteo.test/v1/forecast"

FORECAST_PAYLOAD = {
    "current_weather": {"temperature": 35.2, "weathercode": 1},
    "daily": {
        "time": [
            "2025-10-19", "2025-10-20", "2025-10-21", "2025-10-22",
            "2025-10-23", "2025-10-24", "2025-10-25",
        ],
        "temperature_2m_max": [36.1, 35.0, 34.2, 33.8, 32.5, 31.0, 30.4],
        "temperature_2m_min": [22.0, 21.5, 21.0, 20.2, 19.8, 19.0, 18.7],
        "precipitation_probability_max": [0, 5, None, 40, 10, 0, 0],
        "weather_code": [0, 2, 45, 61, 71, 80, 95],
    },
}


def service_for(handler) -> WeatherService:
    return WeatherService(GEOCODING_URL, FORECAST_URL, transport=httpx.MockTransport(handler))


def open_meteo(requests: list):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.host == "geo.test":
            return httpx.Response(200, json={"results": [{"latitude": 21.49, "longitude": 39.19}]})
        return httpx.Response(200, json=FORECAST_PAYLOAD)
    return handler


class TestClassifyWeatherCode:
    """Test WMO code thresholds."""

    @pytest.mark.parametrize("code,label", [
        (0, "Clear"),
        (1, "Partly Cloudy"),
        (3, "Partly Cloudy"),
        (45, "Foggy"),
        (48, "Foggy"),
        (51, "Rainy"),
        (67, "Rainy"),
        (71, "Snowy"),
        (77, "Snowy"),
        (80, "Rainy"),
        (82, "Rainy"),
        (85, "Snowy"),
        (86, "Snowy"),
        (95, "Stormy"),
        (99, "Stormy"),
    ])
    def test_thresholds(self, code, label):
        assert classify_weather_code(code) == label


class TestWeatherService:
    """Test live lookups and the fallback snapshot."""

    @pytest.mark.asyncio
    async def test_live_forecast(self):
        requests = []
        snapshot = await service_for(open_meteo(requests)).get_forecast("Jeddah")

        assert snapshot.source == DataSource.LIVE
        assert snapshot.current.temperature == 35.2
        assert snapshot.current.condition == "Partly Cloudy"
        assert len(snapshot.forecast) == 5
        assert [d.condition for d in snapshot.forecast] == [
            "Clear", "Partly Cloudy", "Foggy", "Rainy", "Snowy"
        ]
        assert snapshot.forecast[0].date == "Sun, Oct 19"
        assert snapshot.forecast[0].high == 36.1
        assert snapshot.forecast[2].precipitation == 0
        assert snapshot.forecast[3].precipitation == 40
        assert snapshot.chart_url.startswith("https://quickchart.io/chart?c=")
        assert "Jeddah" in httpx.URL(snapshot.chart_url).params["c"]

        geocode, forecast = requests
        assert geocode.url.params["name"] == "Jeddah"
        assert forecast.url.params["latitude"] == "21.49"
        assert forecast.url.params["timezone"] == "Asia/Riyadh"

    @pytest.mark.asyncio
    async def test_unknown_city_returns_fallback(self):
        def handler(request):
            return httpx.Response(200, json={"generationtime_ms": 0.4})

        snapshot = await service_for(handler).get_forecast("Atlantis")

        assert snapshot.is_fallback
        assert snapshot.current.temperature == 28
        assert snapshot.current.condition == "Sunny"
        assert len(snapshot.forecast) == 5

    @pytest.mark.asyncio
    async def test_network_error_returns_fallback(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        snapshot = await service_for(handler).get_forecast("Riyadh")

        assert snapshot == fallback_snapshot()

    @pytest.mark.asyncio
    async def test_malformed_forecast_returns_fallback(self):
        def handler(request):
            if request.url.host == "geo.test":
                return httpx.Response(200, json={"results": [{"latitude": 24.7, "longitude": 46.7}]})
            return httpx.Response(200, json={"daily": {}})

        snapshot = await service_for(handler).get_forecast("Riyadh")

        assert snapshot.is_fallback


class TestFallbackSnapshot:
    """Test the fixed forecast."""

    def test_contents(self):
        snapshot = fallback_snapshot()

        assert snapshot.source == DataSource.FALLBACK
        assert [d.date for d in snapshot.forecast] == ["Today", "Tomorrow", "Day 3", "Day 4", "Day 5"]
        assert [d.high for d in snapshot.forecast] == [32, 30, 33, 31, 29]
        assert snapshot.forecast[4].condition == "Cloudy"

    def test_day_label(self):
        assert format_day_label("2025-03-01") == "Sat, Mar 1"
