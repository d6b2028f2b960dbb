"""
API Routes for the itinerary service.
"""
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, StreamingResponse
from typing import Optional
import logging

from ..config import settings
from ..models.catalog import CarRental, VisaOption
from ..models.profile import COUNTRIES, INTEREST_OPTIONS, Country, TravelerProfile
from ..models.weather import WeatherSnapshot
from ..services.car_rental import CAR_RENTAL_RATES, recommend_car
from ..services.currency import CurrencyConverter
from ..services.llm_client import LLMClient
from ..services.local_data import LocalDataService, local_data
from ..services.prompt_builder import build_prompts
from ..services.relay import ItineraryRelay, UpstreamRequestError
from ..services.restaurants import filter_restaurants
from ..services.weather import WeatherService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["itinerary"])


def error_response(status_code: int, message: str, code: str) -> JSONResponse:
    """Structured error body shared by all endpoints."""
    return JSONResponse(status_code=status_code, content={"error": message, "code": code})


# Dependencies

def get_llm_client(request: Request) -> Optional[LLMClient]:
    """The client built at start-up, or None when no credential is configured."""
    return getattr(request.app.state, "llm_client", None)


def get_currency_converter() -> CurrencyConverter:
    return CurrencyConverter(settings.exchange_url, timeout=settings.http_timeout)


def get_weather_service() -> WeatherService:
    return WeatherService(settings.geocoding_url, settings.forecast_url, timeout=settings.http_timeout)


def get_local_data() -> LocalDataService:
    return local_data


# Endpoints

@router.post("/compile")
async def compile_itinerary(
    profile: TravelerProfile,
    llm: Optional[LLMClient] = Depends(get_llm_client),
    converter: CurrencyConverter = Depends(get_currency_converter),
    weather_service: WeatherService = Depends(get_weather_service),
    data: LocalDataService = Depends(get_local_data),
):
    """Generate an itinerary and stream it back as plain text."""
    if llm is None:
        return error_response(503, "LLM API key is not configured", "service_unavailable")

    try:
        budget = await converter.convert(profile.budget, profile.currency)
        weather = await weather_service.get_forecast(settings.default_weather_city)

        tier = None
        if profile.want_car:
            tier = recommend_car(profile.party_size, budget.amount, max(profile.trip_days, 1))

        restaurants = filter_restaurants(profile.food_pref, data.get_restaurants())
        prompts = build_prompts(
            profile,
            budget,
            weather,
            tier,
            restaurants,
            data.get_cultural_tips(),
            weather_city=settings.default_weather_city,
        )
    except Exception as e:
        logger.exception(f"Error preparing itinerary request: {e}")
        return error_response(500, "Failed to generate itinerary", "internal_error")

    relay = ItineraryRelay(llm)
    try:
        await relay.open(prompts.system, prompts.user)
    except UpstreamRequestError:
        return error_response(502, "Failed to generate itinerary", "upstream_error")

    return StreamingResponse(
        relay.stream(),
        media_type="text/plain; charset=utf-8",
        headers={"Cache-Control": "no-cache"},
    )


@router.get("/weather", response_model=WeatherSnapshot)
async def get_weather(
    city: Optional[str] = Query(None),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """Current weather and a 5-day forecast for a city."""
    try:
        return await weather_service.get_forecast(city or settings.default_weather_city)
    except Exception as e:
        logger.exception(f"Weather API error: {e}")
        return error_response(500, "Failed to fetch weather data", "weather_unavailable")


@router.get("/reference/countries", response_model=list[Country])
async def list_countries():
    return COUNTRIES


@router.get("/reference/interests", response_model=list[str])
async def list_interests():
    return INTEREST_OPTIONS


@router.get("/reference/car-rentals", response_model=dict[str, CarRental])
async def list_car_rentals():
    return {tier.value: rental for tier, rental in CAR_RENTAL_RATES.items()}


@router.get("/reference/cultural-tips", response_model=list[str])
async def list_cultural_tips(data: LocalDataService = Depends(get_local_data)):
    return data.get_cultural_tips()


@router.get("/reference/visa-guidance", response_model=dict[str, VisaOption])
async def list_visa_guidance(data: LocalDataService = Depends(get_local_data)):
    return data.get_visa_guidance()
