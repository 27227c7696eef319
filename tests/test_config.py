from stock_aggregator.config.settings import Config
from stock_aggregator.data.service import StockDataService


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("CONFIG_FILE", str(tmp_path / "missing.yaml"))
    config = Config()
    assert config.cache_ttl_ms == 60_000
    assert config.cache_sweep_interval_ms == 300_000
    assert config.chart_window_minutes == 50
    assert config.correlation_window_minutes == 100

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STOCK_API_TOKEN", "secret")
    monkeypatch.setenv("CACHE_TTL_MS", "1000")
    config = Config()
    assert config.stock_api_token == "secret"
    assert config.cache_ttl_ms == 1000

def test_yaml_source(monkeypatch, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("stock_api_url: http://prices.internal/api\nlog_level: DEBUG\n")
    monkeypatch.setenv("CONFIG_FILE", str(config_file))
    monkeypatch.delenv("STOCK_API_URL", raising=False)

    config = Config()
    assert config.stock_api_url == "http://prices.internal/api"
    assert config.log_level == "DEBUG"

def test_validate_upstream():
    ok, _ = Config(stock_api_token="t").validate_upstream()
    assert ok

    ok, msg = Config(stock_api_token=None).validate_upstream()
    assert not ok
    assert "STOCK_API_TOKEN" in msg

    ok, _ = Config(stock_api_url="ftp://x", stock_api_token="t").validate_upstream()
    assert not ok

def test_service_from_config():
    config = Config(
        stock_api_url="http://prices.internal/api/",
        stock_api_token="t",
        cache_ttl_ms=5_000,
        cache_sweep_interval_ms=20_000,
    )
    service = StockDataService.from_config(config)
    assert service.client.host == "http://prices.internal/api"
    assert service.client.token == "t"
    assert service.cache.ttl_ms == 5_000
    assert service.sweep_interval_ms == 20_000
