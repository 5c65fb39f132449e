"""
Test Fixtures - Shared Test Data and Configurations.

    - sample_config.yaml: Non-default engine configuration (parallel
      facets, strict validation, custom software separator)

Dataset fixtures live in tests/conftest.py.
"""
