"""
Test suite for the dashboard API.

The shared data service is swapped for one whose upstream is unreachable,
so every endpoint runs against deterministic synthetic prices.
"""
import random
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from stock_aggregator.api.client import StockPriceClient
from stock_aggregator.api.exceptions import PriceSourceUnavailableError
from stock_aggregator.config.settings import Config
from stock_aggregator.correlation.matrix import CorrelationEngine
from stock_aggregator.dashboard.api.main import app
from stock_aggregator.dashboard.api.dependencies import (
    get_config,
    get_correlation_engine,
    get_data_service,
)
from stock_aggregator.data.service import StockDataService
from stock_aggregator.data.synthetic import DEFAULT_SYMBOLS, SyntheticPriceGenerator


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def offline_service():
    upstream = MagicMock(spec=StockPriceClient)
    upstream.list_symbols = AsyncMock(side_effect=PriceSourceUnavailableError("down"))
    upstream.fetch_series = AsyncMock(side_effect=PriceSourceUnavailableError("down"))
    generator = SyntheticPriceGenerator(
        rng=random.Random(1),
        clock=lambda: datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
    )
    return StockDataService(client=upstream, generator=generator)


@pytest.fixture
def client(offline_service):
    """Create test client."""
    engine = CorrelationEngine(offline_service)
    app.dependency_overrides[get_data_service] = lambda: offline_service
    app.dependency_overrides[get_correlation_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# System Tests
# ============================================================================

class TestSystem:
    """Test system endpoints."""

    def test_root(self, client):
        """Root should return API info."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Stock Price Aggregator API"
        assert "version" in data

    def test_health_healthy_before_any_failure(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["using_fallback"] is False
        assert "uptime_seconds" in data

    def test_health_degraded_after_fallback(self, client):
        client.get("/api/stocks")
        data = client.get("/api/health").json()
        assert data["status"] == "degraded"
        assert data["using_fallback"] is True

    def test_cache_stats(self, client):
        client.get("/api/stocks/AAPL?minutes=10")
        data = client.get("/api/cache").json()
        assert data["size"] == 1
        assert data["keys"][0].startswith("AAPL_10_")
        assert data["using_fallback"] is True


# ============================================================================
# Stock Tests
# ============================================================================

class TestStocks:
    """Test stock endpoints."""

    def test_list_stocks_falls_back(self, client):
        response = client.get("/api/stocks")
        assert response.status_code == 200
        data = response.json()
        assert data["symbols"] == DEFAULT_SYMBOLS
        assert data["using_fallback"] is True

    def test_get_stock_series(self, client):
        response = client.get("/api/stocks/aapl?minutes=20")
        assert response.status_code == 200
        data = response.json()
        assert data["symbol"] == "AAPL"
        assert data["minutes"] == 20
        assert len(data["prices"]) == 20
        assert set(data["prices"][0].keys()) == {"price", "timestamp"}

        stats = data["statistics"]
        prices = [p["price"] for p in data["prices"]]
        assert stats["latest"] == prices[-1]
        assert stats["min"] == min(prices)
        assert stats["max"] == max(prices)
        assert stats["change"] == pytest.approx(prices[-1] - prices[0])

    def test_default_window(self, client):
        data = client.get("/api/stocks/MSFT").json()
        assert len(data["prices"]) == 50

    def test_invalid_window(self, client):
        response = client.get("/api/stocks/AAPL?minutes=0")
        assert response.status_code == 422


# ============================================================================
# Correlation Tests
# ============================================================================

class TestCorrelation:
    """Test correlation endpoint."""

    def test_correlation_matrix(self, client):
        response = client.get("/api/correlation?symbols=AAPL&symbols=GOOGL&symbols=MSFT&minutes=30")
        assert response.status_code == 200
        data = response.json()

        symbols = data["symbols"]
        assert symbols == ["AAPL", "GOOGL", "MSFT"]
        matrix = data["matrix"]
        for a in symbols:
            assert matrix[a][a] == 1.0
            for b in symbols:
                assert matrix[a][b] == matrix[b][a]
                assert -1.0 <= matrix[a][b] <= 1.0

        assert len(data["pairs"]) == 3
        assert data["pairs"][0]["strength"] in {
            "Very Strong", "Strong", "Moderate", "Weak", "Very Weak",
        }

    def test_requires_two_distinct_symbols(self, client):
        response = client.get("/api/correlation?symbols=AAPL&symbols=aapl")
        assert response.status_code == 400

    def test_requires_symbols(self, client):
        response = client.get("/api/correlation")
        assert response.status_code == 422


# ============================================================================
# Configured Windows
# ============================================================================

class TestConfiguredWindows:
    """Default windows come from configuration."""

    @pytest.fixture
    def configured_client(self, offline_service):
        config = Config(chart_window_minutes=15, correlation_window_minutes=30)
        engine = CorrelationEngine(offline_service, window_minutes=config.correlation_window_minutes)
        app.dependency_overrides[get_config] = lambda: config
        app.dependency_overrides[get_data_service] = lambda: offline_service
        app.dependency_overrides[get_correlation_engine] = lambda: engine
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_stock_uses_chart_window(self, configured_client, offline_service):
        data = configured_client.get("/api/stocks/AAPL").json()
        assert data["minutes"] == 15
        assert len(data["prices"]) == 15
        assert offline_service.cache_stats().keys[0].startswith("AAPL_15_")

    def test_correlation_uses_correlation_window(self, configured_client, offline_service):
        data = configured_client.get("/api/correlation?symbols=AAPL&symbols=MSFT").json()
        assert data["minutes"] == 30
        assert all(key.split("_")[1] == "30" for key in offline_service.cache_stats().keys)

    def test_explicit_window_wins(self, configured_client):
        data = configured_client.get("/api/stocks/AAPL?minutes=5").json()
        assert data["minutes"] == 5
