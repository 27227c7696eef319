"""
Configuration Package.
"""
from stock_aggregator.config.settings import Config, YamlConfigSettingsSource

__all__ = ["Config", "YamlConfigSettingsSource"]
