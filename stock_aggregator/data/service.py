"""
Cached, failure-tolerant stock data service.

Wraps the upstream ``StockPriceClient`` and the ``SyntheticPriceGenerator``
behind one interface. Callers always get usable data: any upstream failure
switches the service to synthetic prices for the rest of its lifetime
(until ``reset_fallback``), and results from either source are cached for
one TTL window.
"""
import asyncio
from dataclasses import dataclass
from typing import Dict, List, Optional

from stock_aggregator.api.client import StockPriceClient
from stock_aggregator.api.exceptions import PriceSourceError
from stock_aggregator.config.settings import Config
from stock_aggregator.data.cache import TTLCache
from stock_aggregator.data.synthetic import SyntheticPriceGenerator
from stock_aggregator.logging import logger as root_logger
from stock_aggregator.models import CacheStats, PricePoint

logger = root_logger.with_context(component="data_service")

SYMBOL_LIST_KEY = "symbolList"
DEFAULT_SWEEP_INTERVAL_MS = 300_000


@dataclass
class FetchOutcome:
    """Result of one task in a batch fetch: either a series or an error."""
    symbol: str
    series: Optional[List[PricePoint]] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StockDataService:
    """
    Uniform access to symbol lists and price series.

    Construct one instance per process and share it; the sticky fallback
    flag and the cache live on the instance.

    Example:
        service = StockDataService(StockPriceClient(token=token))
        await service.start()
        prices = await service.get_series("AAPL", 50)
        await service.stop()
    """

    def __init__(
        self,
        client: StockPriceClient,
        generator: Optional[SyntheticPriceGenerator] = None,
        cache: Optional[TTLCache] = None,
        sweep_interval_ms: int = DEFAULT_SWEEP_INTERVAL_MS,
    ):
        self.client = client
        self.generator = generator or SyntheticPriceGenerator()
        self.cache = cache or TTLCache()
        self.sweep_interval_ms = sweep_interval_ms

        # Flipped once on the first upstream failure, never cleared implicitly
        self.using_fallback = False

        self._sweep_task: Optional[asyncio.Task] = None

    @classmethod
    def from_config(cls, config: Config) -> "StockDataService":
        client = StockPriceClient(host=config.stock_api_url, token=config.stock_api_token)
        return cls(
            client=client,
            cache=TTLCache(ttl_ms=config.cache_ttl_ms),
            sweep_interval_ms=config.cache_sweep_interval_ms,
        )

    # =========================================================================
    # Data access
    # =========================================================================

    def series_cache_key(self, symbol: str, minutes: int) -> str:
        # Bucketed by TTL window so every period gets a fresh key
        bucket = self.cache.clock() // self.cache.ttl_ms
        return f"{symbol}_{minutes}_{bucket}"

    def _enter_fallback(self, error: PriceSourceError, **context) -> None:
        if not self.using_fallback:
            logger.fallback(
                f"Price source unavailable, serving synthetic prices: {error}",
                status=error.status,
                **context,
            )
        self.using_fallback = True

    async def get_symbol_list(self) -> List[str]:
        """Return the tradable symbols, from the upstream or the synthetic universe."""
        cached = self.cache.get(SYMBOL_LIST_KEY)
        if cached is not None:
            return cached

        if self.using_fallback:
            symbols = self.generator.list_symbols()
        else:
            try:
                symbols = await self.client.list_symbols()
            except PriceSourceError as e:
                self._enter_fallback(e, operation="get_symbol_list")
                symbols = self.generator.list_symbols()

        self.cache.set(SYMBOL_LIST_KEY, symbols)
        return symbols

    async def get_series(self, symbol: str, minutes: int = 50) -> List[PricePoint]:
        """Return the last ``minutes`` price samples for ``symbol``."""
        key = self.series_cache_key(symbol, minutes)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if self.using_fallback:
            series = self.generator.generate(symbol, minutes)
        else:
            try:
                series = await self.client.fetch_series(symbol, minutes)
            except PriceSourceError as e:
                self._enter_fallback(e, operation="get_series", symbol=symbol)
                series = self.generator.generate(symbol, minutes)

        self.cache.set(key, series)
        return series

    async def _settle(self, symbol: str, minutes: int) -> FetchOutcome:
        try:
            return FetchOutcome(symbol=symbol, series=await self.get_series(symbol, minutes))
        except Exception as e:
            return FetchOutcome(symbol=symbol, error=e)

    async def get_many_series(self, symbols: List[str], minutes: int = 50) -> Dict[str, List[PricePoint]]:
        """
        Fetch several symbols concurrently.

        Every symbol is fetched in its own task and all tasks are awaited;
        a symbol whose fetch fails outright is left out of the result
        rather than failing the batch.
        """
        outcomes = await asyncio.gather(*(self._settle(symbol, minutes) for symbol in symbols))

        result: Dict[str, List[PricePoint]] = {}
        for outcome in outcomes:
            if outcome.ok:
                result[outcome.symbol] = outcome.series
            else:
                logger.error(
                    f"Dropping {outcome.symbol} from batch: {outcome.error}",
                    symbol=outcome.symbol,
                )
        return result

    # =========================================================================
    # Cache management
    # =========================================================================

    def evict_expired(self) -> int:
        return self.cache.evict_expired()

    def cache_stats(self) -> CacheStats:
        return CacheStats(
            size=len(self.cache),
            keys=self.cache.keys(),
            using_fallback=self.using_fallback,
        )

    def clear_cache(self) -> None:
        self.cache.clear()

    def reset_fallback(self) -> None:
        """Allow the upstream source to be tried again."""
        if self.using_fallback:
            logger.info("Fallback reset, upstream price source will be retried")
        self.using_fallback = False

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def running(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    async def start(self) -> None:
        """Start the periodic cache sweep."""
        if self.running:
            logger.warning("Cache sweep is already running")
            return

        await self.client.connect()
        self._sweep_task = asyncio.create_task(self._sweep_loop(), name="cache_sweep")
        logger.info("Stock data service started", sweep_interval_ms=self.sweep_interval_ms)

    async def stop(self) -> None:
        """Stop the sweep and release the HTTP session."""
        if self._sweep_task and not self._sweep_task.done():
            self._sweep_task.cancel()
            try:
                await self._sweep_task
            except asyncio.CancelledError:
                pass
        self._sweep_task = None

        await self.client.close()
        logger.info("Stock data service stopped")

    async def _sweep_loop(self) -> None:
        interval = self.sweep_interval_ms / 1000
        while True:
            try:
                await asyncio.sleep(interval)
                removed = self.evict_expired()
                logger.debug("Cache sweep finished", removed=removed, size=len(self.cache))
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Error in cache sweep: {e}")
