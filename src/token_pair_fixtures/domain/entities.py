"""
Core Domain Entities.

This module defines the token pair fixture: two tokens plus the initial
price between them, as consumed by exchange test harnesses.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Dict, List

from pydantic import BaseModel, Field, model_validator

from token_pair_fixtures.domain.value_objects import PriceRatio, Token


class TokenPairFixture(BaseModel):
    """
    Immutable description of a token pair for a test scenario.

    The initial price is quoted as tokenB per tokenA: a WETH/RDN fixture
    with a price of 514/1 means 1 WETH buys 514 RDN.
    """

    token_a: Token = Field(..., alias="tokenA")
    token_b: Token = Field(..., alias="tokenB")
    initial_price: PriceRatio = Field(..., alias="initialPrice")

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    @model_validator(mode="after")
    def check_distinct_tokens(self) -> TokenPairFixture:
        if self.token_a.address == self.token_b.address:
            raise ValueError(
                f"tokenA and tokenB share the address {self.token_a.address}"
            )
        return self

    @property
    def pair_name(self) -> str:
        """Name used for fixture files, e.g. WETH_RDN."""
        return f"{self.token_a.symbol}_{self.token_b.symbol}"

    @property
    def price(self) -> Fraction:
        """Initial price of tokenA in units of tokenB."""
        return self.initial_price.value

    @property
    def inverse_price(self) -> Fraction:
        """Initial price of tokenB in units of tokenA."""
        return self.initial_price.inverse().value

    def funded_tokens(self) -> List[Token]:
        """Tokens that carry a non-zero funding amount."""
        return [t for t in (self.token_a, self.token_b) if t.is_funded]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the keyed source representation."""
        return self.model_dump(by_alias=True)
