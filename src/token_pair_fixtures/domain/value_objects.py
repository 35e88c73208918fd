"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe one side of a token pair
or the price between the two sides. They have no identity of their own.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Union

from pydantic import BaseModel, Field, field_serializer, field_validator


# =============================================================================
# Patterns
# =============================================================================

# 0x-prefixed, 40 lower-case hex digits
ADDRESS_PATTERN = r"^0x[0-9a-f]{40}$"

# Ticker symbols such as WETH, RDN, 1INCH
SYMBOL_PATTERN = r"^[A-Z0-9]{1,12}$"


class Token(BaseModel):
    """One side of a token pair."""

    symbol: str = Field(..., pattern=SYMBOL_PATTERN, description="Ticker symbol")
    address: str = Field(
        ..., pattern=ADDRESS_PATTERN, description="On-chain contract address"
    )
    funding: Decimal = Field(
        ..., ge=0, description="Amount of the token funded for the scenario"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("funding", mode="before")
    @classmethod
    def coerce_float_funding(cls, value: Any) -> Any:
        # 94.97 must become Decimal("94.97"), not its binary expansion
        if isinstance(value, float):
            return Decimal(repr(value))
        return value

    @field_serializer("funding")
    def serialize_funding(self, funding: Decimal) -> Union[int, float, str]:
        """Emit funding as a plain number whenever that loses nothing."""
        if funding == funding.to_integral_value():
            return int(funding)
        as_float = float(funding)
        if Decimal(repr(as_float)) == funding:
            return as_float
        return str(funding)

    @property
    def is_funded(self) -> bool:
        return self.funding > 0


class PriceRatio(BaseModel):
    """Exact initial price expressed as numerator / denominator."""

    numerator: int = Field(..., gt=0, strict=True)
    denominator: int = Field(..., gt=0, strict=True)

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def value(self) -> Fraction:
        """Price as an exact rational number."""
        return Fraction(self.numerator, self.denominator)

    def inverse(self) -> PriceRatio:
        """Return the ratio with numerator and denominator swapped."""
        return PriceRatio(numerator=self.denominator, denominator=self.numerator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
