"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from token_pair_fixtures.config.models import FixtureSettings
from token_pair_fixtures.loader.fixture_loader import FixtureLoader
from token_pair_fixtures.validation.fixture_validator import FixtureValidator

from tests.fixtures import RDN_ADDRESS, WETH_ADDRESS


@pytest.fixture
def weth_rdn_dict() -> Dict[str, Any]:
    """Source representation of the WETH/RDN mainnet fixture."""
    return {
        "tokenA": {
            "symbol": "WETH",
            "address": WETH_ADDRESS,
            "funding": 94.97,
        },
        "tokenB": {
            "symbol": "RDN",
            "address": RDN_ADDRESS,
            "funding": 0,
        },
        "initialPrice": {
            "numerator": 514,
            "denominator": 1,
        },
    }


@pytest.fixture
def make_fixture_dict(weth_rdn_dict: Dict[str, Any]) -> Callable[..., Dict[str, Any]]:
    """
    Factory for fixture mappings with selected fields overridden.

    Usage:
        make_fixture_dict(("initialPrice", "denominator"), 0)
    """

    def _make(*overrides: Any) -> Dict[str, Any]:
        data = copy.deepcopy(weth_rdn_dict)
        for path, value in zip(overrides[::2], overrides[1::2]):
            target = data
            for key in path[:-1]:
                target = target[key]
            target[path[-1]] = value
        return data

    return _make


@pytest.fixture
def validator() -> FixtureValidator:
    """Create fixture validator."""
    return FixtureValidator()


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Empty fixtures directory with a mainnet network folder."""
    directory = tmp_path / "fixtures"
    (directory / "mainnet").mkdir(parents=True)
    return directory


@pytest.fixture
def settings(fixtures_dir: Path) -> FixtureSettings:
    """Settings pointing at the temporary fixtures directory."""
    return FixtureSettings(fixtures_dir=fixtures_dir)


@pytest.fixture
def loader(settings: FixtureSettings) -> FixtureLoader:
    """Loader reading from the temporary fixtures directory."""
    return FixtureLoader(settings=settings)


@pytest.fixture
def bundled_loader() -> FixtureLoader:
    """Loader reading the fixtures shipped with the package."""
    return FixtureLoader()
