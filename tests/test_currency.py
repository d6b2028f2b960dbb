"""Tests for budget currency conversion."""
import httpx
import pytest

from saudi_trip.models.lookup import DataSource
from saudi_trip.services.currency import (
    FALLBACK_RATES,
    CurrencyConverter,
    fallback_convert,
    format_sar,
)

EXCHANGE_URL = "https://fx.test/convert"


def converter_for(handler) -> CurrencyConverter:
    return CurrencyConverter(EXCHANGE_URL, transport=httpx.MockTransport(handler))


class TestFallbackRates:
    """Test the static conversion table."""

    @pytest.mark.parametrize("code", sorted(FALLBACK_RATES))
    def test_known_codes(self, code):
        assert fallback_convert(1234.56, code) == round(1234.56 * FALLBACK_RATES[code], 2)

    def test_unknown_code_uses_usd(self):
        assert fallback_convert(100, "XYZ") == round(100 * FALLBACK_RATES["USD"], 2)

    def test_lowercase_code(self):
        assert fallback_convert(100, "eur") == 410.0


class TestCurrencyConverter:
    """Test live conversion and its fallback path."""

    @pytest.mark.asyncio
    async def test_live_rate(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.url.params)
            return httpx.Response(200, json={"result": 3751.237})

        result = await converter_for(handler).convert(1000, "USD")

        assert result.amount == 3751.24
        assert result.currency == "SAR"
        assert result.source == DataSource.LIVE
        assert not result.is_fallback
        assert seen["from"] == "USD"
        assert seen["to"] == "SAR"
        assert seen["amount"] == "1000"

    @pytest.mark.asyncio
    async def test_error_status_falls_back(self):
        result = await converter_for(lambda request: httpx.Response(503)).convert(1000, "GBP")

        assert result.is_fallback
        assert result.amount == 4800.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        '{"rate": 4.1}',
        '{"result": null}',
        '{"result": NaN}',
        '{"result": Infinity}',
        '{"result": true}',
        '{"result": -50}',
        '{"result": 0}',
        'not json',
    ])
    async def test_malformed_payload_falls_back(self, body):
        """Missing, non-numeric, non-finite or non-positive results use the table."""
        def handler(request):
            return httpx.Response(200, content=body, headers={"Content-Type": "application/json"})

        result = await converter_for(handler).convert(200, "EUR")

        assert result.is_fallback
        assert result.amount == 820.0

    @pytest.mark.asyncio
    async def test_network_error_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        result = await converter_for(handler).convert(1000, "JPY")

        assert result.is_fallback
        assert result.amount == 25.0

    @pytest.mark.asyncio
    async def test_no_exchange_url_falls_back(self):
        result = await CurrencyConverter(None).convert(500, "AED")

        assert result.source == DataSource.FALLBACK
        assert result.amount == 510.0


class TestFormatSar:
    """Test human-readable SAR amounts."""

    def test_whole_amount(self):
        assert format_sar(37500) == "37,500 SAR"

    def test_fractional_amount(self):
        assert format_sar(1234.5) == "1,234.5 SAR"
        assert format_sar(99.99) == "99.99 SAR"
