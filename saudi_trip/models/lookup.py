"""
Lookup results - Distinguish live data from fallback data.
"""
from pydantic import BaseModel, Field
from enum import Enum


class DataSource(str, Enum):
    """Where a looked-up value came from."""
    LIVE = "live"
    FALLBACK = "fallback"


class ConversionResult(BaseModel):
    """A budget converted into the destination currency."""
    amount: float = Field(..., description="Converted amount, 2 decimal places")
    currency: str = Field("SAR", description="Destination currency code")
    source: DataSource = Field(DataSource.LIVE, description="Live rate or fallback table")

    @property
    def is_fallback(self) -> bool:
        return self.source == DataSource.FALLBACK
