"""
Catalog models - Static, read-only reference data.
"""
from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class CarTier(str, Enum):
    """Car rental categories."""
    ECONOMY = "economy"
    COMPACT = "compact"
    MIDSIZE = "midsize"
    SUV = "suv"
    LUXURY = "luxury"


class CarRental(BaseModel):
    """A rental tier with its daily rate in SAR."""
    type: str = Field(..., description="Display label, e.g. 'Economy Car'")
    daily_rate: int = Field(..., ge=0, description="Price per day in SAR")
    features: list[str] = Field(default_factory=list)
    image: Optional[str] = None


class Restaurant(BaseModel):
    """A restaurant from the local dataset."""
    name: str
    cuisine: str
    city: str
    rating: float = Field(..., ge=0, le=5)
    price_range: str
    signature_dish: str


class VisaOption(BaseModel):
    """One way of entering the country."""
    title: str
    duration: str
    stay_period: str
    cost: str
    eligibility: str
    process: str
