"""
Fixture Validator - Turn Raw Mappings into Validated Fixtures.

Validates a fixture's source representation in one pass:
    - All required fields present, no unknown fields
    - Addresses well-formed and distinct
    - Funding non-negative
    - Price numerator and denominator positive

Design Notes:
    - Fail-fast: nothing is defaulted or repaired
    - Every problem is reported, not just the first
    - Pydantic errors never leak past this module
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import ValidationError

from token_pair_fixtures.domain.entities import TokenPairFixture

logger = logging.getLogger(__name__)


class MalformedFixture(Exception):
    """Raised when a fixture cannot be turned into a TokenPairFixture."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        source: Optional[Union[str, Path]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or [message]
        self.source = source

    def __str__(self) -> str:
        if self.source is not None:
            return f"{self.source}: {self.message}"
        return self.message


class FixtureValidator:
    """Validates raw fixture data and builds TokenPairFixture objects."""

    def validate(
        self,
        data: Any,
        source: Optional[Union[str, Path]] = None,
    ) -> TokenPairFixture:
        """
        Validate raw fixture data.

        Args:
            data: Parsed source representation (expected to be a mapping)
            source: Where the data came from, for error messages

        Returns:
            Validated TokenPairFixture

        Raises:
            MalformedFixture: If the data does not describe a valid fixture
        """
        if not isinstance(data, dict):
            message = f"Fixture must be a mapping, got {type(data).__name__}"
            logger.error(f"Fixture validation failed: {message}")
            raise MalformedFixture(message, source=source)

        try:
            fixture = TokenPairFixture.model_validate(data)
        except ValidationError as exc:
            errors = self._format_errors(exc)
            message = "; ".join(errors)
            logger.error(f"Fixture validation failed: {message}")
            raise MalformedFixture(message, errors=errors, source=source) from exc

        logger.debug(
            f"Fixture validated: pair={fixture.pair_name}, "
            f"price={fixture.initial_price}"
        )
        return fixture

    def _format_errors(self, exc: ValidationError) -> List[str]:
        """Render Pydantic errors as 'dotted.path: reason' strings."""
        errors: List[str] = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            if location:
                errors.append(f"{location}: {error['msg']}")
            else:
                errors.append(error["msg"])
        return errors
