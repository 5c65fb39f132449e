"""
Integration Tests - Engine and Facet Invariant Runs.

These tests use the MockDatasetProvider to exercise configuration,
engine, pipeline and facet calculator together.

Test Files:
    - test_engine_end_to_end.py: Config file -> engine -> filter/facets
    - test_facet_invariant.py: Randomized facet count verification
"""
