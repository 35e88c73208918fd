"""
Test Suite for Token Pair Fixtures.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Tests against the fixtures shipped with the package
    - fixtures/: Shared test data

Running Tests:
    pytest tests/                              # All tests
    pytest tests/unit/                         # Unit tests only
    pytest tests/integration/                  # Integration tests only
    pytest --cov=src/token_pair_fixtures       # With coverage
"""
