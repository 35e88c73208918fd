"""
Domain Layer - Token Pair Fixture Records.

Entities:
    - TokenPairFixture: Two tokens and the initial price between them

Value Objects:
    - Token: Symbol, on-chain address and funding amount
    - PriceRatio: Exact numerator/denominator price

Design Principles:
    - Immutable (frozen Pydantic models)
    - Validated on construction, never partially built
    - No infrastructure dependencies
"""

from token_pair_fixtures.domain.entities import TokenPairFixture
from token_pair_fixtures.domain.value_objects import (
    ADDRESS_PATTERN,
    SYMBOL_PATTERN,
    PriceRatio,
    Token,
)

__all__ = [
    "ADDRESS_PATTERN",
    "SYMBOL_PATTERN",
    "PriceRatio",
    "Token",
    "TokenPairFixture",
]
