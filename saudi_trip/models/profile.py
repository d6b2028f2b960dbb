"""
Traveler Profile - The questionnaire answers for one planning session.
Validated once on input and immutable afterwards.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import date
from enum import Enum
import math


class FoodPreference(str, Enum):
    """Dietary preference options."""
    HALAL = "halal"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    NO_RESTRICTIONS = "no-restrictions"


class Mobility(str, Enum):
    """Mobility requirement options."""
    FULL = "full"
    LIMITED = "limited"
    WHEELCHAIR = "wheelchair"


class Country(BaseModel):
    """An origin country offered by the questionnaire."""
    code: str
    name: str
    currency: str


COUNTRIES = [
    Country(code="US", name="United States", currency="USD"),
    Country(code="GB", name="United Kingdom", currency="GBP"),
    Country(code="DE", name="Germany", currency="EUR"),
    Country(code="FR", name="France", currency="EUR"),
    Country(code="JP", name="Japan", currency="JPY"),
    Country(code="CN", name="China", currency="CNY"),
    Country(code="IN", name="India", currency="INR"),
    Country(code="AE", name="UAE", currency="AED"),
    Country(code="EG", name="Egypt", currency="EGP"),
    Country(code="AU", name="Australia", currency="AUD"),
]

INTEREST_OPTIONS = [
    "Historical Sites",
    "Modern Architecture",
    "Desert Adventures",
    "Shopping",
    "Cultural Experiences",
    "Food & Dining",
    "Entertainment",
    "Religious Tourism",
    "Nature & Wildlife",
    "Adventure Sports",
]

MIN_BUDGET = 100
DEFAULT_CURRENCY = "USD"


def find_country(code: str) -> Optional[Country]:
    """Look up a country by its two-letter code."""
    code = code.upper()
    return next((c for c in COUNTRIES if c.code == code), None)


class TravelerProfile(BaseModel):
    """
    Questionnaire answers - the input for itinerary generation.
    Budget is expressed in the traveler's origin currency.
    """
    model_config = ConfigDict(frozen=True)

    origin_country: str = Field(
        ..., min_length=2, max_length=2,
        description="Two-letter code of the country the traveler comes from"
    )
    travel_dates: tuple[date, date] = Field(
        ...,
        description="Trip start and end dates"
    )
    party_size: int = Field(
        ..., ge=1, le=10,
        description="Number of travelers"
    )
    budget: float = Field(
        ..., ge=MIN_BUDGET,
        description="Total budget in the origin currency"
    )
    interests: list[str] = Field(
        ..., min_length=1,
        description="Selected interest tags"
    )
    want_car: bool = Field(
        False,
        description="Whether the traveler wants a rental car"
    )
    food_pref: FoodPreference = Field(
        FoodPreference.NO_RESTRICTIONS,
        description="Dietary preference"
    )
    mobility: Mobility = Field(
        Mobility.FULL,
        description="Mobility requirement"
    )

    @model_validator(mode="after")
    def check_dates(self) -> "TravelerProfile":
        start, end = self.travel_dates
        if end < start:
            raise ValueError("End date must be on or after the start date")
        return self

    @property
    def start_date(self) -> date:
        return self.travel_dates[0]

    @property
    def end_date(self) -> date:
        return self.travel_dates[1]

    @property
    def trip_days(self) -> int:
        """Trip length in whole days, rounded up."""
        delta = self.end_date - self.start_date
        return math.ceil(delta.total_seconds() / 86400)

    @property
    def country(self) -> Optional[Country]:
        return find_country(self.origin_country)

    @property
    def currency(self) -> str:
        country = self.country
        return country.currency if country else DEFAULT_CURRENCY
