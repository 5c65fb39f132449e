"""
Pipeline Package - Cross-Entity Filtering and Orchestration.

Components:
    - CrossEntityPipeline: runs the passes and builds FilteredData
    - passes: pure set-narrowing passes over names and center keys
    - predicates: per-entity matcher bundles built from a FilterSpec
    - DataContext: per-call container with the software index
    - ranges: dynamic revenue range and base ranges for sliders
    - FacetEngine: facade wiring config, metrics and validation

The pipeline is responsible for:
    - Filtering each collection with its own checks
    - Joining children to surviving parents
    - Back-propagating function and prospect filters
    - Closing the result so every collection agrees

Design Principles:
    - Pure functions of (collections, filter spec)
    - No state kept between calls
"""
