"""
Fixture Registry - Load-Once Cache of Token Pair Fixtures.

This module provides a thread-safe registry that hands out fixtures keyed
by network and pair name. Each fixture is read from disk at most once per
registry, so a whole test run shares the same immutable instances.

Usage:
    registry = FixtureRegistry()
    fixture = registry.get("WETH_RDN")             # default network
    fixture = registry.get("WETH_RDN", "mainnet")

    # Collection described by a settings file
    registry = FixtureRegistry.from_config("test/resources/fixtures.yaml")

    # Fixtures built in code
    registry.register(my_fixture, network="testnet")
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock
from typing import Dict, List, Optional, Protocol, Tuple, Union

from token_pair_fixtures.domain.entities import TokenPairFixture
from token_pair_fixtures.loader.fixture_loader import FixtureLoader

logger = logging.getLogger(__name__)

FixtureKey = Tuple[str, str]


class FixtureRegistryProtocol(Protocol):
    """Protocol for fixture registry implementations."""

    def get(self, name: str, network: Optional[str] = None) -> TokenPairFixture:
        """Get a fixture by pair name."""
        ...

    def register(
        self,
        fixture: TokenPairFixture,
        network: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        """Register a fixture under a network and pair name."""
        ...

    def list_all(self) -> Dict[FixtureKey, TokenPairFixture]:
        """List all cached fixtures."""
        ...


class FixtureRegistry:
    """
    Thread-safe, load-once registry of fixtures.

    Supports:
        - Lazy loading from the configured fixtures directory
        - Registration of fixtures built in code
        - Preloading a whole network
    """

    def __init__(self, loader: Optional[FixtureLoader] = None) -> None:
        """
        Initialize registry.

        Args:
            loader: Loader used for cache misses (defaults to bundled data)
        """
        self._loader = loader or FixtureLoader()
        self._fixtures: Dict[FixtureKey, TokenPairFixture] = {}
        self._lock = RLock()
        logger.debug("FixtureRegistry initialized")

    @classmethod
    def from_config(cls, config_path: Union[str, Path]) -> FixtureRegistry:
        """Create a registry serving the collection a settings file describes."""
        return cls(loader=FixtureLoader.from_config(config_path))

    @property
    def default_network(self) -> str:
        return self._loader.settings.default_network

    def get(self, name: str, network: Optional[str] = None) -> TokenPairFixture:
        """
        Get a fixture, loading it on first access.

        Args:
            name: Pair name, e.g. "WETH_RDN"
            network: Network (default from loader settings)

        Returns:
            The cached TokenPairFixture

        Raises:
            KeyError: If no such fixture exists
            MalformedFixture: If the fixture file is invalid
        """
        key = (network or self.default_network, name)
        with self._lock:
            if key not in self._fixtures:
                try:
                    fixture = self._loader.load(name, key[0])
                except FileNotFoundError as exc:
                    raise KeyError(f"Unknown fixture {key[0]}/{name}") from exc
                self._fixtures[key] = fixture
                logger.info(f"Loaded fixture: {key[0]}/{name}")
            return self._fixtures[key]

    def register(
        self,
        fixture: TokenPairFixture,
        network: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Register a fixture.

        Args:
            fixture: Fixture to register
            network: Network (default from loader settings)
            name: Pair name (defaults to fixture.pair_name)

        Raises:
            ValueError: If the key is already registered
        """
        key = (network or self.default_network, name or fixture.pair_name)
        with self._lock:
            if key in self._fixtures:
                raise ValueError(
                    f"Fixture '{key[0]}/{key[1]}' is already registered. "
                    f"Use unregister() first."
                )
            self._fixtures[key] = fixture
            logger.info(f"Registered fixture: {key[0]}/{key[1]}")

    def unregister(self, name: str, network: Optional[str] = None) -> bool:
        """
        Remove a fixture from the registry.

        Returns:
            True if the fixture was registered
        """
        key = (network or self.default_network, name)
        with self._lock:
            if key not in self._fixtures:
                return False
            del self._fixtures[key]
            logger.info(f"Unregistered fixture: {key[0]}/{key[1]}")
            return True

    def preload(self, network: Optional[str] = None) -> List[str]:
        """
        Load every fixture of a network into the registry.

        Already cached fixtures are kept as they are.

        Returns:
            Pair names now available for the network
        """
        network = network or self.default_network
        loaded = self._loader.load_all(network)
        with self._lock:
            for name, fixture in loaded.items():
                self._fixtures.setdefault((network, name), fixture)
            return sorted(n for net, n in self._fixtures if net == network)

    def list_all(self) -> Dict[FixtureKey, TokenPairFixture]:
        """Snapshot of all cached fixtures."""
        with self._lock:
            return dict(self._fixtures)

    def clear(self) -> None:
        """Drop every cached fixture."""
        with self._lock:
            self._fixtures.clear()
            logger.debug("FixtureRegistry cleared")

    def __contains__(self, key: FixtureKey) -> bool:
        with self._lock:
            return key in self._fixtures

    def __len__(self) -> int:
        with self._lock:
            return len(self._fixtures)
