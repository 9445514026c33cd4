from .context import (
    ASSERTION_RESULTS_COLLECTOR,
    assertions_collector,
    get_assertions_collector,
)

__all__ = [
    "ASSERTION_RESULTS_COLLECTOR",
    "assertions_collector",
    "get_assertions_collector",
]
