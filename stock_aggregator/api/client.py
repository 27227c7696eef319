"""
Upstream stock price service client.

A thin async wrapper around the evaluation stock API: one round trip per
call, bearer credential attached, no retries. Any failure surfaces as a
``PriceSourceError``; resilience lives in the data service.
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, List, Optional

import aiohttp

from stock_aggregator.api.exceptions import (
    PriceSourceError,
    PriceSourceAPIError,
    AuthenticationError,
    SymbolNotFoundError,
    RateLimitError,
    PriceSourceUnavailableError,
    InvalidResponseError,
    ConfigurationError,
)
from stock_aggregator.models import PricePoint, format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


def parse_retry_after(value: Optional[str]) -> Optional[float]:
    """
    Seconds to wait from a ``Retry-After`` header.

    Accepts both delta-seconds and HTTP-date forms. Anything unparseable
    gives ``None``.
    """
    if not value:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        pass
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return max((when - datetime.now(timezone.utc)).total_seconds(), 0.0)


class StockPriceClient:
    """
    Asynchronous client for the stock price REST API.

    Example:
        async with StockPriceClient(token="...") as client:
            symbols = await client.list_symbols()
            prices = await client.fetch_series("AAPL", minutes=50)
    """

    DEFAULT_HOST = "http://20.244.56.144/evaluation-service"

    def __init__(self, host: str = DEFAULT_HOST, token: Optional[str] = None):
        if not host:
            raise ConfigurationError("Stock API host must not be empty")
        self.host = host.rstrip("/")
        self.token = token
        self.session: Optional[aiohttp.ClientSession] = None
        self._request_count = 0

    @property
    def request_count(self) -> int:
        return self._request_count

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def connect(self) -> None:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(headers=self._headers())

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            await self.connect()
        return self.session

    async def close(self):
        if self.session and not self.session.closed:
            await self.session.close()
        logger.debug(f"StockPriceClient closed after {self._request_count} requests")

    async def __aenter__(self) -> "StockPriceClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        session = await self._get_session()
        url = f"{self.host}{endpoint}"

        self._request_count += 1
        logger.debug(f"Request {self._request_count}: GET {url} params={params}")

        try:
            async with session.get(url, params=params) as response:
                if response.status == 429:
                    raise RateLimitError(
                        retry_after=parse_retry_after(response.headers.get("Retry-After"))
                    )
                elif response.status in (401, 403):
                    raise AuthenticationError(response.status, await self._error_text(response))
                elif response.status >= 400:
                    raise PriceSourceAPIError(response.status, await self._error_text(response))

                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Network error during GET {url}: {e}")
            raise PriceSourceUnavailableError(f"Network error: {e}")

        try:
            return json.loads(body.decode("utf-8")) if body else None
        except UnicodeDecodeError as e:
            raise InvalidResponseError(f"Undecodable body from {endpoint}: {e}")
        except json.JSONDecodeError as e:
            raise InvalidResponseError(f"Invalid JSON from {endpoint}: {e}")

    @staticmethod
    async def _error_text(response: aiohttp.ClientResponse) -> str:
        return (await response.read()).decode("utf-8", errors="replace")

    async def list_symbols(self) -> List[str]:
        """Fetches the tradable symbols, in the order the service lists them."""
        data = await self._request("/stocks")
        if not isinstance(data, dict) or not isinstance(data.get("stocks"), dict):
            raise InvalidResponseError("Expected {'stocks': {name: symbol}} from /stocks")
        return [str(symbol) for symbol in data["stocks"].values()]

    async def fetch_series(self, symbol: str, minutes: int) -> List[PricePoint]:
        """Fetches the last ``minutes`` worth of price samples for a symbol."""
        try:
            data = await self._request(f"/stocks/{symbol}", params={"minutes": minutes})
        except PriceSourceAPIError as e:
            if e.status == 404:
                raise SymbolNotFoundError(symbol) from e
            raise

        if not isinstance(data, list):
            return []

        try:
            points = []
            for item in data:
                point = PricePoint(
                    price=item["price"],
                    timestamp=item.get("lastUpdatedAt") or format_timestamp(datetime.now(timezone.utc)),
                )
                parse_timestamp(point.timestamp)
                points.append(point)
            return points
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidResponseError(f"Malformed price sample for {symbol}: {e}")

    async def check_availability(self) -> bool:
        """Returns True when the price service answers ``/stocks`` successfully."""
        try:
            await self._request("/stocks")
            return True
        except PriceSourceError:
            return False
