"""
Car Rental - Tier catalog and the recommendation rule.
"""
from ..models.catalog import CarRental, CarTier


CAR_RENTAL_RATES: dict[CarTier, CarRental] = {
    CarTier.ECONOMY: CarRental(
        type="Economy Car",
        daily_rate=154,
        features=["Air Conditioning", "Manual Transmission", "4 Passengers", "Fuel Efficient"],
        image="https://i.ibb.co/qkqTQMP/economy-car.jpg",
    ),
    CarTier.COMPACT: CarRental(
        type="Compact Car",
        daily_rate=189,
        features=["Air Conditioning", "Automatic Transmission", "4 Passengers", "Bluetooth"],
        image="https://i.ibb.co/9bM8QdV/compact-car.jpg",
    ),
    CarTier.MIDSIZE: CarRental(
        type="Midsize Car",
        daily_rate=247,
        features=["Air Conditioning", "Automatic Transmission", "5 Passengers", "GPS Navigation"],
        image="https://i.ibb.co/LNvL1Qz/midsize-car.jpg",
    ),
    CarTier.SUV: CarRental(
        type="SUV",
        daily_rate=350,
        features=["Air Conditioning", "Automatic Transmission", "7 Passengers", "GPS Navigation", "4WD"],
        image="https://i.ibb.co/h7YtQmc/suv-car.jpg",
    ),
    CarTier.LUXURY: CarRental(
        type="Luxury Car",
        daily_rate=520,
        features=["Premium Interior", "Automatic Transmission", "4 Passengers", "GPS Navigation", "Premium Sound"],
        image="https://i.ibb.co/2Y8QHx4/luxury-car.jpg",
    ),
}

# Share of the total budget set aside for getting around
TRANSPORT_BUDGET_SHARE = 0.30
MAX_SEDAN_PARTY = 4


def daily_transport_budget(total_budget: float, trip_days: int) -> float:
    return TRANSPORT_BUDGET_SHARE * total_budget / trip_days


def recommend_car(party_size: int, total_budget: float, trip_days: int) -> CarTier:
    """
    Pick a rental tier for the party.

    Args:
        party_size: Number of travelers (>= 1)
        total_budget: Total trip budget in SAR
        trip_days: Trip length in days (>= 1)

    Returns:
        The most comfortable tier the daily transport budget allows
    """
    daily_budget = daily_transport_budget(total_budget, trip_days)

    if party_size <= MAX_SEDAN_PARTY:
        if daily_budget >= CAR_RENTAL_RATES[CarTier.LUXURY].daily_rate:
            return CarTier.LUXURY
        if daily_budget >= CAR_RENTAL_RATES[CarTier.MIDSIZE].daily_rate:
            return CarTier.MIDSIZE
        if daily_budget >= CAR_RENTAL_RATES[CarTier.COMPACT].daily_rate:
            return CarTier.COMPACT
        return CarTier.ECONOMY

    if daily_budget >= CAR_RENTAL_RATES[CarTier.SUV].daily_rate:
        return CarTier.SUV
    return CarTier.MIDSIZE


def rental_cost(tier: str, days: int) -> int:
    """Total rental price in SAR; 0 for an unknown tier."""
    try:
        rental = CAR_RENTAL_RATES[CarTier(tier)]
    except ValueError:
        return 0
    return rental.daily_rate * days
