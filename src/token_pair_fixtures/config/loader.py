"""
Configuration Loader - Fixture Settings from YAML.

A settings file sits next to a fixture collection and says where each
network's fixtures live:

    fixtures_dir: add-token-pair
    default_network: mainnet
    networks:
      rinkeby:
        fixtures_dir: legacy/rinkeby
        extensions: [.json]

Relative directories are resolved against the settings file's own
directory, so a collection can be moved as a whole.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Union

import yaml

from token_pair_fixtures.config.models import FixtureSettings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates fixture settings files."""

    def load(self, config_path: Union[str, Path]) -> FixtureSettings:
        """
        Load settings from a YAML file.

        Args:
            config_path: Path to the settings file

        Returns:
            Validated FixtureSettings with directories made absolute

        Raises:
            FileNotFoundError: If the settings file doesn't exist
            ValidationError: If the settings are invalid
        """
        path = Path(config_path).resolve()
        settings = self.load_from_dict(self._load_yaml(path)).anchored_at(path.parent)
        logger.debug(
            f"Loaded fixture settings from {path}: fixtures_dir={settings.fixtures_dir}, "
            f"networks={sorted(settings.networks)}"
        )
        return settings

    def load_from_dict(self, config_dict: Any) -> FixtureSettings:
        """Validate settings given as a mapping; directories are left as given."""
        return FixtureSettings.model_validate(config_dict)

    def _load_yaml(self, path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return {} if data is None else data


def load_config(config_path: Union[str, Path]) -> FixtureSettings:
    """Convenience function to load a settings file."""
    return ConfigLoader().load(config_path)
