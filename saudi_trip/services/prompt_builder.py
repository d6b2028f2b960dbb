"""
Prompt Builder.
Turns a traveler profile and the gathered side data into the system and user
prompts sent to the LLM.
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel

from ..models.catalog import CarTier, Restaurant
from ..models.lookup import ConversionResult
from ..models.profile import TravelerProfile
from ..models.weather import WeatherSnapshot
from .car_rental import CAR_RENTAL_RATES, rental_cost
from .currency import format_sar


SYSTEM_PROMPT = """You are an elite Saudi travel planner with deep knowledge of Saudi Arabia's culture, attractions, logistics, and current tourism offerings. Create a detailed, day-by-day itinerary that showcases the best of Saudi Arabia while respecting cultural norms and the user's specific preferences.

Key Requirements:
- Provide specific, actionable recommendations with real locations and activities
- Include cultural context and respectful travel advice
- Suggest optimal timing for activities considering prayer times and local customs
- Balance must-see attractions with hidden gems
- Consider seasonal weather and regional differences
- Provide practical logistics information (transportation, booking tips, etc.)
- Include cost estimates in Saudi Riyals (SAR)
- Respect dietary restrictions and accessibility needs
- Highlight unique Saudi experiences that showcase Vision 2030 developments

Format your response as a detailed itinerary with:
1. Day-by-day schedule with specific activities and timings
2. Detailed descriptions of attractions and experiences
3. Practical tips for each activity
4. Cost estimates where relevant
5. Transportation recommendations
6. Cultural insights and etiquette reminders"""

RESTAURANT_SAMPLE_SIZE = 5
TIP_SAMPLE_SIZE = 3
NO_CAR_OPTION = "Public transport and ride-sharing"
DEFAULT_WEATHER_CITY = "Riyadh"


class ItineraryPrompts(BaseModel):
    """The two prompt blocks for one generation request."""
    system: str
    user: str

    def to_messages(self) -> list[dict]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def format_date(value: date) -> str:
    """Locale-independent long date, e.g. '01 March 2025'."""
    return value.strftime("%d %B %Y")


def format_days(days: int) -> str:
    return f"{days} day" if days == 1 else f"{days} days"


def _format_car(tier: Optional[CarTier], trip_days: int) -> str:
    if tier is None:
        return NO_CAR_OPTION
    car = CAR_RENTAL_RATES[tier]
    # Rentals are billed for at least one day
    days = max(trip_days, 1)
    total = format_sar(rental_cost(tier, days))
    return f"{car.type} at {car.daily_rate} SAR/day (about {total} for {format_days(days)})"


def build_user_prompt(
    profile: TravelerProfile,
    budget: ConversionResult,
    weather: WeatherSnapshot,
    car: Optional[CarTier],
    restaurants: list[Restaurant],
    cultural_tips: list[str],
    weather_city: str = DEFAULT_WEATHER_CITY,
) -> str:
    """Interpolate the concrete trip parameters into the request prompt."""
    country = profile.country
    origin = country.name if country else "Unknown"
    restaurant_names = ", ".join(r.name for r in restaurants[:RESTAURANT_SAMPLE_SIZE]) or "None listed"
    tips = "\n".join(f"- {tip}" for tip in cultural_tips[:TIP_SAMPLE_SIZE])

    return f"""Create a personalized Saudi Arabia itinerary with these details:

TRAVELER PROFILE:
- Origin: {origin} ({profile.party_size} travelers)
- Travel Dates: {format_date(profile.start_date)} to {format_date(profile.end_date)} ({format_days(profile.trip_days)})
- Budget: {format_sar(budget.amount)} total
- Interests: {", ".join(profile.interests)}
- Food Preference: {profile.food_pref.value}
- Car Rental: {"Yes" if profile.want_car else "No"}
- Mobility: {profile.mobility.value}

ADDITIONAL CONTEXT:
- Current weather in {weather_city}: {weather.current.temperature:g}°C, {weather.current.condition}
- Recommended restaurants available: {restaurant_names}
- Car rental option: {_format_car(car, profile.trip_days)}

ETIQUETTE REMINDERS:
{tips}

Please create a comprehensive itinerary that maximizes their experience while staying within budget and respecting all cultural considerations."""


def build_prompts(
    profile: TravelerProfile,
    budget: ConversionResult,
    weather: WeatherSnapshot,
    car: Optional[CarTier],
    restaurants: list[Restaurant],
    cultural_tips: list[str],
    weather_city: str = DEFAULT_WEATHER_CITY,
) -> ItineraryPrompts:
    return ItineraryPrompts(
        system=SYSTEM_PROMPT,
        user=build_user_prompt(profile, budget, weather, car, restaurants, cultural_tips, weather_city),
    )
