"""
Weather models - Current conditions plus a short daily forecast.
"""
from pydantic import BaseModel, Field

from .lookup import DataSource


class CurrentWeather(BaseModel):
    """Conditions right now."""
    temperature: float
    condition: str


class DailyForecast(BaseModel):
    """Forecast for a single day."""
    date: str = Field(..., description="Display label, e.g. 'Mon, Oct 19'")
    high: float
    low: float
    condition: str
    precipitation: float = Field(0, description="Max precipitation probability (%)")


class WeatherSnapshot(BaseModel):
    """Weather for one city, fetched fresh for every request."""
    current: CurrentWeather
    forecast: list[DailyForecast] = Field(default_factory=list)
    chart_url: str = Field("", description="QuickChart image of the daily highs")
    source: DataSource = DataSource.LIVE

    @property
    def is_fallback(self) -> bool:
        return self.source == DataSource.FALLBACK
