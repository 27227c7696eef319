"""
Synthetic price generator.

Produces plausible one-minute price paths when the upstream service is
unreachable. The shape of a generated series is deterministic (one point
per minute ending just before "now"); only the values are random.
"""
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from stock_aggregator.models import PricePoint, format_timestamp


DEFAULT_SYMBOLS: List[str] = ["AAPL", "GOOGL", "MSFT", "AMZN", "TSLA", "META", "NFLX", "NVDA"]

BASE_PRICES: Dict[str, float] = {
    "AAPL": 150,
    "GOOGL": 2800,
    "MSFT": 310,
    "AMZN": 3200,
    "TSLA": 800,
    "META": 250,
    "NFLX": 400,
    "NVDA": 450,
}

DEFAULT_BASE_PRICE = 100.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SyntheticPriceGenerator:
    """
    Random-walk price generator keyed by symbol.

    Each step moves the price by a uniform delta within +/-1% of the
    symbol's base price, floored at 80% of the base price.
    """

    STEP_FRACTION = 0.02   # full width of the uniform step, as a share of base
    FLOOR_FRACTION = 0.8
    CADENCE = timedelta(minutes=1)

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = _utc_now,
        symbols: Optional[List[str]] = None,
        base_prices: Optional[Dict[str, float]] = None,
    ):
        self.rng = rng or random.Random()
        self.clock = clock
        self._symbols = list(symbols or DEFAULT_SYMBOLS)
        self._base_prices = dict(base_prices or BASE_PRICES)

    def list_symbols(self) -> List[str]:
        return list(self._symbols)

    def base_price(self, symbol: str) -> float:
        return float(self._base_prices.get(symbol, DEFAULT_BASE_PRICE))

    def generate(self, symbol: str, minutes: int) -> List[PricePoint]:
        """
        Generate ``minutes`` samples ending one minute before now.

        Point ``i`` is stamped ``now - (minutes - i)`` minutes. A
        non-positive window yields an empty series.
        """
        if minutes <= 0:
            return []

        base = self.base_price(symbol)
        floor = base * self.FLOOR_FRACTION
        now = self.clock()

        points = []
        price = base
        for i in range(minutes):
            change = (self.rng.random() - 0.5) * (base * self.STEP_FRACTION)
            price = max(price + change, floor)
            points.append(PricePoint(
                price=round(price, 2),
                timestamp=format_timestamp(now - (minutes - i) * self.CADENCE),
            ))

        return points
