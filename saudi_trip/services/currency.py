"""
Currency Converter.
Converts a traveler's budget into Saudi Riyals, falling back to approximate
static rates whenever the exchange service cannot be used.
"""
import httpx
import logging
import math
from typing import Optional

from ..models.lookup import ConversionResult, DataSource

logger = logging.getLogger(__name__)

TARGET_CURRENCY = "SAR"

# Approximate SAR per unit of each currency
FALLBACK_RATES = {
    "USD": 3.75,
    "EUR": 4.1,
    "GBP": 4.8,
    "JPY": 0.025,
    "AED": 1.02,
    "CNY": 0.52,
    "INR": 0.045,
    "EGP": 0.12,
    "AUD": 2.5,
}
BASE_CURRENCY = "USD"


def fallback_convert(amount: float, from_currency: str) -> float:
    """Convert with the static table; unknown codes use the USD rate."""
    rate = FALLBACK_RATES.get(from_currency.upper(), FALLBACK_RATES[BASE_CURRENCY])
    return round(amount * rate, 2)


def format_sar(amount: float) -> str:
    """Human-readable SAR amount, e.g. '37,500 SAR' or '1,234.5 SAR'."""
    text = f"{amount:,.2f}".rstrip("0").rstrip(".")
    return f"{text} {TARGET_CURRENCY}"


class CurrencyConverter:
    """Client for the exchange-rate service."""

    def __init__(
        self,
        exchange_url: Optional[str],
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.exchange_url = exchange_url
        self.timeout = timeout
        self._transport = transport

    async def convert(self, amount: float, from_currency: str) -> ConversionResult:
        """
        Convert an amount into SAR.

        Never raises: any failure of the live lookup (missing URL, network
        error, bad status, malformed body) yields a fallback result.
        """
        try:
            converted = await self._fetch_live(amount, from_currency)
            return ConversionResult(amount=converted, currency=TARGET_CURRENCY, source=DataSource.LIVE)
        except (httpx.HTTPError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Currency conversion error for {from_currency}, using fallback rates: {e}")
            return ConversionResult(
                amount=fallback_convert(amount, from_currency),
                currency=TARGET_CURRENCY,
                source=DataSource.FALLBACK,
            )

    async def _fetch_live(self, amount: float, from_currency: str) -> float:
        if not self.exchange_url:
            raise ValueError("No exchange service configured")

        params = {"from": from_currency, "to": TARGET_CURRENCY, "amount": amount}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(self.exchange_url, params=params)
            response.raise_for_status()
            data = response.json()

        result = data["result"]
        if isinstance(result, bool):
            raise ValueError(f"Exchange service returned a non-numeric result: {result!r}")
        converted = float(result)
        if not math.isfinite(converted) or converted <= 0:
            raise ValueError(f"Exchange service returned an invalid amount: {result!r}")
        return round(converted, 2)
