"""
Test Suite for Account Facets.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Engine and invariant tests over the mock dataset
    - fixtures/: Shared sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest -m integration                   # Integration tests only
"""
