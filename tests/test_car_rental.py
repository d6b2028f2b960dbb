"""Tests for the car rental recommendation rule."""
import pytest

from saudi_trip.models.catalog import CarTier
from saudi_trip.services.car_rental import (
    CAR_RENTAL_RATES,
    daily_transport_budget,
    recommend_car,
    rental_cost,
)

SEDAN_ORDER = [CarTier.ECONOMY, CarTier.COMPACT, CarTier.MIDSIZE, CarTier.LUXURY]


class TestRecommendCar:
    """Test tier selection from party size, budget and trip length."""

    def test_daily_budget_is_thirty_percent(self):
        assert daily_transport_budget(10000, 5) == pytest.approx(600)

    def test_small_party_high_budget(self):
        assert recommend_car(4, 10000, 5) == CarTier.LUXURY

    @pytest.mark.parametrize("daily,tier", [
        (100, CarTier.ECONOMY),
        (188, CarTier.ECONOMY),
        (190, CarTier.COMPACT),
        (200, CarTier.COMPACT),
        (246, CarTier.COMPACT),
        (248, CarTier.MIDSIZE),
        (519, CarTier.MIDSIZE),
        (521, CarTier.LUXURY),
    ])
    def test_small_party_thresholds(self, daily, tier):
        # One-day trip: total budget = daily / 0.3
        assert recommend_car(2, daily / 0.3, 1) == tier

    def test_small_party_monotonic_in_budget(self):
        ranks = [
            SEDAN_ORDER.index(recommend_car(3, budget, 5))
            for budget in range(0, 20001, 50)
        ]
        assert ranks == sorted(ranks)
        assert ranks[0] == 0 and ranks[-1] == len(SEDAN_ORDER) - 1

    @pytest.mark.parametrize("party_size", [5, 8, 10])
    def test_large_party(self, party_size):
        assert recommend_car(party_size, 10000, 5) == CarTier.SUV
        assert recommend_car(party_size, 2000, 5) == CarTier.MIDSIZE

    def test_large_party_never_gets_sedan_tiers(self):
        tiers = {recommend_car(6, budget, 3) for budget in range(0, 50001, 500)}
        assert tiers == {CarTier.MIDSIZE, CarTier.SUV}


class TestCatalog:
    """Test the rental catalog helpers."""

    def test_rates(self):
        assert {tier: rental.daily_rate for tier, rental in CAR_RENTAL_RATES.items()} == {
            CarTier.ECONOMY: 154,
            CarTier.COMPACT: 189,
            CarTier.MIDSIZE: 247,
            CarTier.SUV: 350,
            CarTier.LUXURY: 520,
        }

    def test_rental_cost(self):
        assert rental_cost("suv", 3) == 1050
        assert rental_cost(CarTier.ECONOMY, 2) == 308

    def test_rental_cost_unknown_tier(self):
        assert rental_cost("limousine", 3) == 0
