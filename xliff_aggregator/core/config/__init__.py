"""
Plugin configuration loading.
"""

from .plugin_config import (
    ConfigurationError,
    ImporterSettings,
    PluginConfigBuilder,
    PluginConfigLoader,
    PluginSettings,
)

__all__ = [
    "PluginSettings",
    "ImporterSettings",
    "PluginConfigLoader",
    "PluginConfigBuilder",
    "ConfigurationError",
]
