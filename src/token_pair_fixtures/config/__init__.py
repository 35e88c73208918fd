"""
Configuration Package - Settings Model and Loader.

Configuration Structure:
    - FixtureSettings: fixtures directory, default network, file extensions
    - NetworkSettings: per-network directory and extension overrides

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Paths in a settings file are relative to that file
"""

from token_pair_fixtures.config.loader import ConfigLoader, load_config
from token_pair_fixtures.config.models import (
    BUNDLED_FIXTURES_DIR,
    FixtureSettings,
    NetworkSettings,
)

__all__ = [
    "BUNDLED_FIXTURES_DIR",
    "ConfigLoader",
    "FixtureSettings",
    "NetworkSettings",
    "load_config",
]
