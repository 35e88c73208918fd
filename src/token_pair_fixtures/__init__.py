"""
Token Pair Fixtures - Validated Test Inputs for Exchange Scenarios.

A token pair fixture names two tokens (symbol, on-chain address, funding
amount) and the initial price between them. Test harnesses for exchanges
load these fixtures to fund accounts and list pairs; this package only
loads, validates and serves them.

Main Components:
    - domain: TokenPairFixture, Token, PriceRatio
    - validation: FixtureValidator and the MalformedFixture error
    - loader: FixtureLoader for YAML/JSON files
    - registry: FixtureRegistry, a load-once cache for a test run
    - config: FixtureSettings and the YAML settings loader

Example:
    >>> from token_pair_fixtures import load_builtin
    >>> fixture = load_builtin("WETH_RDN")
    >>> fixture.price
    Fraction(514, 1)

"""

import logging

from token_pair_fixtures.domain import PriceRatio, Token, TokenPairFixture
from token_pair_fixtures.loader import (
    FixtureLoader,
    list_builtin,
    load_builtin,
    load_fixture,
)
from token_pair_fixtures.registry import FixtureRegistry
from token_pair_fixtures.validation import FixtureValidator, MalformedFixture

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Show fixture loading activity, e.g. from a conftest.py.

    At INFO the registry reports each fixture it loads or registers and
    the loader reports how many fixtures a network scan found. DEBUG
    adds every file read or written and every settings file applied. Rejected fixtures are
    logged at ERROR with their field errors before MalformedFixture is
    raised, so they show up even at the default WARNING level.

    Args:
        level: Level for the token_pair_fixtures loggers (default: INFO)
        format: Log message format

    Example:
        >>> import token_pair_fixtures
        >>> token_pair_fixtures.configure_logging(logging.DEBUG)
        >>> fixture = token_pair_fixtures.FixtureRegistry().get("WETH_RDN")
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("token_pair_fixtures").setLevel(level)


__all__ = [
    "FixtureLoader",
    "FixtureRegistry",
    "FixtureValidator",
    "MalformedFixture",
    "PriceRatio",
    "Token",
    "TokenPairFixture",
    "configure_logging",
    "list_builtin",
    "load_builtin",
    "load_fixture",
]
