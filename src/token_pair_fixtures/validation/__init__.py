"""
Validation Package - Fixture Validation.

This package provides:
    - FixtureValidator: Build validated fixtures from raw mappings
    - MalformedFixture: The single error raised for any invalid fixture

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from token_pair_fixtures.validation.fixture_validator import (
    FixtureValidator,
    MalformedFixture,
)

__all__ = [
    "FixtureValidator",
    "MalformedFixture",
]
