"""
Fixture Loader - Read Token Pair Fixtures from YAML/JSON Files.

Fixtures live under ``<fixtures_dir>/<network>/<TOKENA>_<TOKENB>.<ext>``,
unless a settings file points a network at its own directory.
A fixture can be loaded by path, by pair name within a network, or all at
once for a network. Loaded fixtures can be written back with ``dump``.

Design Notes:
    - YAML and JSON are both read with yaml.safe_load
    - Any parse or validation problem surfaces as MalformedFixture
    - A missing file is a FileNotFoundError, not a malformed fixture
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from token_pair_fixtures.config.loader import load_config
from token_pair_fixtures.config.models import FixtureSettings
from token_pair_fixtures.domain.entities import TokenPairFixture
from token_pair_fixtures.validation.fixture_validator import (
    FixtureValidator,
    MalformedFixture,
)

logger = logging.getLogger(__name__)


class FixtureLoader:
    """Loads and validates token pair fixtures."""

    def __init__(
        self,
        settings: Optional[FixtureSettings] = None,
        validator: Optional[FixtureValidator] = None,
    ) -> None:
        """
        Initialize fixture loader.

        Args:
            settings: Fixture location settings (defaults to bundled data)
            validator: Validator used to build fixtures
        """
        self.settings = settings or FixtureSettings()
        self._validator = validator or FixtureValidator()

    @classmethod
    def from_config(
        cls,
        config_path: Union[str, Path],
        validator: Optional[FixtureValidator] = None,
    ) -> FixtureLoader:
        """Create a loader from a fixture settings file."""
        return cls(settings=load_config(config_path), validator=validator)

    def load(
        self,
        fixture: Union[str, Path],
        network: Optional[str] = None,
    ) -> TokenPairFixture:
        """
        Load a single fixture.

        Args:
            fixture: File path, or a pair name such as "WETH_RDN"
            network: Network directory for pair names (default from settings)

        Returns:
            Validated TokenPairFixture

        Raises:
            FileNotFoundError: If no matching file exists
            MalformedFixture: If the file does not hold a valid fixture
        """
        path = self._resolve(fixture, network)
        data = self._read(path)
        result = self._validator.validate(data, source=path)
        logger.debug(f"Loaded fixture {result.pair_name} from {path}")
        return result

    def load_from_dict(self, data: Dict[str, Any]) -> TokenPairFixture:
        """
        Load a fixture from its source representation.

        Raises:
            MalformedFixture: If the mapping does not hold a valid fixture
        """
        return self._validator.validate(data)

    def load_all(self, network: Optional[str] = None) -> Dict[str, TokenPairFixture]:
        """
        Load every fixture of a network.

        Args:
            network: Network directory (default from settings)

        Returns:
            Fixtures keyed by pair name, in name order

        Raises:
            FileNotFoundError: If the network directory doesn't exist
            MalformedFixture: On the first invalid fixture file
        """
        network = network or self.settings.default_network
        fixtures: Dict[str, TokenPairFixture] = {}
        for path in self.list_files(network):
            if path.stem in fixtures:
                raise MalformedFixture(
                    f"Duplicate fixture name {path.stem} in network {network}",
                    source=path,
                )
            fixtures[path.stem] = self.load(path)

        logger.info(f"Loaded {len(fixtures)} fixtures for network {network}")
        return fixtures

    def list_names(self, network: Optional[str] = None) -> List[str]:
        """Pair names available in a network."""
        return sorted({path.stem for path in self.list_files(network)})

    def list_files(self, network: Optional[str] = None) -> List[Path]:
        """Fixture files of a network, sorted by name."""
        network = network or self.settings.default_network
        directory = self.settings.network_dir(network)
        extensions = self.settings.extensions_for(network)
        if not directory.is_dir():
            raise FileNotFoundError(f"Network directory not found: {directory}")
        return sorted(
            p
            for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() in extensions
        )

    def dump(self, fixture: TokenPairFixture, path: Union[str, Path]) -> Path:
        """
        Write a fixture in its source representation.

        The format follows the suffix: .json writes JSON, anything else YAML.

        Returns:
            The path written
        """
        path = Path(path)
        data = fixture.to_dict()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                json.dump(data, f, indent=2)
                f.write("\n")
            else:
                yaml.safe_dump(data, f, sort_keys=False)
        logger.debug(f"Wrote fixture {fixture.pair_name} to {path}")
        return path

    def _resolve(self, fixture: Union[str, Path], network: Optional[str]) -> Path:
        """Resolve a path or pair name to an existing file."""
        path = Path(fixture)
        if path.suffix or len(path.parts) > 1:
            if not path.is_file():
                raise FileNotFoundError(f"Fixture file not found: {path}")
            return path

        network = network or self.settings.default_network
        directory = self.settings.network_dir(network)
        for ext in self.settings.extensions_for(network):
            candidate = directory / f"{fixture}{ext}"
            if candidate.is_file():
                return candidate
        raise FileNotFoundError(f"Fixture {fixture} not found in {directory}")

    def _read(self, path: Path) -> Any:
        """Parse a YAML or JSON file."""
        # Binary mode: undecodable bytes become a yaml ReaderError
        with open(path, "rb") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                logger.error(f"Could not parse fixture {path}: {exc}")
                raise MalformedFixture(
                    f"Invalid YAML/JSON: {exc}", source=path
                ) from exc


def load_fixture(
    fixture: Union[str, Path],
    network: Optional[str] = None,
    settings: Optional[FixtureSettings] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> TokenPairFixture:
    """
    Convenience function to load one fixture.

    Args:
        fixture: File path or pair name
        network: Network for pair names
        settings: Fixture location settings
        config_path: Settings file, used when settings is not given

    Returns:
        Validated TokenPairFixture
    """
    if settings is None and config_path is not None:
        return FixtureLoader.from_config(config_path).load(fixture, network)
    return FixtureLoader(settings=settings).load(fixture, network)


def load_builtin(name: str, network: str = "mainnet") -> TokenPairFixture:
    """Load a fixture shipped with the package, e.g. load_builtin("WETH_RDN")."""
    return FixtureLoader().load(name, network)


def list_builtin(network: str = "mainnet") -> List[str]:
    """Pair names shipped with the package for a network."""
    return FixtureLoader().list_names(network)
