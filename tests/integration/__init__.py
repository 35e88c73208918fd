"""
Integration Tests - Package Data End to End.

These tests load the fixtures shipped inside the package through the
public helpers, the loader and the registry together.

Test Files:
    - test_bundled_fixtures.py: Bundled fixtures load, validate and round-trip
"""
