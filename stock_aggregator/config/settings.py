from typing import List, Optional, Tuple, Type, Dict, Any
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource
import yaml
import os

class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A simple settings source that loads variables from a YAML file
    at the project's config/config.yaml location.
    """
    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        pass

    def __call__(self) -> Dict[str, Any]:
        config_file = os.getenv("CONFIG_FILE", "config/config.yaml")
        if os.path.exists(config_file):
            with open(config_file) as f:
                return yaml.safe_load(f) or {}
        return {}

class Config(BaseSettings):
    # Environment
    env: str = Field("development", description="Environment: development, staging, production")

    # Upstream price service
    stock_api_url: str = "http://20.244.56.144/evaluation-service"
    stock_api_token: Optional[str] = None

    # Cache
    cache_ttl_ms: int = 60_000
    cache_sweep_interval_ms: int = 300_000

    # Windows requested by the dashboard views
    chart_window_minutes: int = 50
    correlation_window_minutes: int = 100

    # Dashboard API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/aggregator.log"

    def validate_upstream(self) -> tuple[bool, str]:
        """
        Validate configuration for talking to the upstream price service.

        Returns:
            Tuple of (is_valid, message)
        """
        if not self.stock_api_url.startswith(("http://", "https://")):
            return False, "STOCK_API_URL must be an http(s) URL"

        if not self.stock_api_token:
            return False, "STOCK_API_TOKEN is not set - synthetic prices will be served"

        if self.cache_ttl_ms <= 0:
            return False, "CACHE_TTL_MS must be positive"

        return True, "Upstream configuration valid"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )
