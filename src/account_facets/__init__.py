"""
Account Facets - Cross-Entity Filtering and Facet Counting.

An in-memory engine for the account/center/prospect dashboard dataset.
Given the entity collections and a composite filter specification it
computes a mutually consistent filtered view of every collection and,
for each filterable attribute, the available values with counts as if
that attribute's own selector were cleared.

Architecture:
    - Pure passes over identifier sets (account names, center keys)
    - Small matcher objects behind one ``accepts`` protocol
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Entity records, FilterSpec and result value objects
    - matching: Value/keyword/range matchers and number parsing
    - pipeline: Cross-entity passes, orchestration, range helpers
    - facets: Facet registry and option calculator
    - adapters: Mock dataset provider, in-memory metrics
    - config: Configuration models and loaders

Example:
    >>> from account_facets import FacetEngine, create_default_filters
    >>> engine = FacetEngine()
    >>> result = engine.filter(dataset, create_default_filters())
    >>> print(f"{len(result.accounts)} accounts remain")

"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Account Facets.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import account_facets
        >>> account_facets.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("account_facets").setLevel(level)


from account_facets.domain.entities import (  # noqa: E402
    Account,
    Center,
    Dataset,
    Function,
    Prospect,
    Service,
    Tech,
)
from account_facets.domain.value_objects import (  # noqa: E402
    FilteredData,
    FilterMode,
    FilterOption,
    FilterSpec,
    FilterValue,
    NumericRange,
)
from account_facets.domain.filter_summary import (  # noqa: E402
    count_active_filters,
    create_default_filters,
    with_filter_defaults,
)
from account_facets.pipeline.engine import FacetEngine  # noqa: E402

__all__ = [
    "Account",
    "Center",
    "Dataset",
    "FacetEngine",
    "FilteredData",
    "FilterMode",
    "FilterOption",
    "FilterSpec",
    "FilterValue",
    "Function",
    "NumericRange",
    "Prospect",
    "Service",
    "Tech",
    "configure_logging",
    "count_active_filters",
    "create_default_filters",
    "with_filter_defaults",
]
