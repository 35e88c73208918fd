"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_value_objects.py: Token, PriceRatio, TokenPairFixture
    - test_fixture_validator.py: Validation and MalformedFixture
    - test_fixture_loader.py: File loading, network scans, dumping
    - test_fixture_registry.py: Load-once fixture cache
    - test_config_loader.py: Settings loading/validation
"""
