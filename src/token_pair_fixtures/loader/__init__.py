"""
Loader Package - Reading and Writing Fixture Files.

Components:
    - FixtureLoader: Load by path, pair name or network; dump back to disk
    - load_fixture / load_builtin / list_builtin: Convenience helpers
"""

from token_pair_fixtures.loader.fixture_loader import (
    FixtureLoader,
    list_builtin,
    load_builtin,
    load_fixture,
)

__all__ = [
    "FixtureLoader",
    "list_builtin",
    "load_builtin",
    "load_fixture",
]
