"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

# Fixtures shipped with the package
BUNDLED_FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data"

DEFAULT_EXTENSIONS = [".yaml", ".yml", ".json"]


def _normalize_extensions(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return None
    for ext in value:
        if not ext.startswith(".") or len(ext) < 2:
            raise ValueError(f"extension must look like '.yaml', got '{ext}'")
    return [ext.lower() for ext in value]


class NetworkSettings(BaseModel):
    """Overrides for a single network; unset fields fall back to the defaults."""

    fixtures_dir: Optional[Path] = Field(
        default=None, description="Directory holding this network's fixture files"
    )
    extensions: Optional[List[str]] = Field(default=None, min_length=1)

    model_config = {"extra": "forbid"}

    @field_validator("extensions")
    @classmethod
    def check_extensions(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _normalize_extensions(value)


class FixtureSettings(BaseModel):
    """Where fixture files live and how they are named."""

    fixtures_dir: Path = Field(default=BUNDLED_FIXTURES_DIR)
    default_network: str = Field(default="mainnet", min_length=1)
    extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        min_length=1,
    )
    networks: Dict[str, NetworkSettings] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}

    @field_validator("extensions")
    @classmethod
    def check_extensions(cls, value: List[str]) -> List[str]:
        return _normalize_extensions(value)

    def network_dir(self, network: str) -> Path:
        """Directory holding the fixtures of one network."""
        override = self.networks.get(network)
        if override is not None and override.fixtures_dir is not None:
            return override.fixtures_dir
        return self.fixtures_dir / network

    def extensions_for(self, network: str) -> List[str]:
        """File extensions searched for one network, in priority order."""
        override = self.networks.get(network)
        if override is not None and override.extensions is not None:
            return override.extensions
        return self.extensions

    def anchored_at(self, base: Path) -> FixtureSettings:
        """Copy with every relative directory resolved against base."""
        networks = {
            name: (
                net.model_copy(update={"fixtures_dir": base / net.fixtures_dir})
                if net.fixtures_dir is not None and not net.fixtures_dir.is_absolute()
                else net
            )
            for name, net in self.networks.items()
        }
        fixtures_dir = self.fixtures_dir
        if not fixtures_dir.is_absolute():
            fixtures_dir = base / fixtures_dir
        return self.model_copy(
            update={"fixtures_dir": fixtures_dir, "networks": networks}
        )
