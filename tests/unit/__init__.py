"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused. Most of them run
against the small hand-built dataset in tests/conftest.py so expected
results can be read off the data.
"""
