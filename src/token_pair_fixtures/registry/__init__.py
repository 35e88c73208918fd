"""
Registry Module - Shared Fixture Cache.

Components:
    - FixtureRegistry: Thread-safe, load-once fixture cache
    - FixtureRegistryProtocol: Interface for alternative registries
"""

from token_pair_fixtures.registry.fixture_registry import (
    FixtureKey,
    FixtureRegistry,
    FixtureRegistryProtocol,
)

__all__ = [
    "FixtureKey",
    "FixtureRegistry",
    "FixtureRegistryProtocol",
]
