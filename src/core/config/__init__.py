"""
Configuration package.

Each integration has its own section; ``config`` is built once from the
environment (and a local .env file) at import time.
"""

from src.core.config.cors_config import CORSConfig
from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.provider_config import ProviderConfig
from src.core.config.settings import Config, config

__all__ = [
    "Config",
    "CORSConfig",
    "GitHubConfig",
    "LoggingConfig",
    "ProviderConfig",
    "config",
]
