"""dictexpect - Fluent assertions for dictionaries."""

from .assertions import (
    AndConstraint,
    AssertionFailedError,
    AssertionResult,
    InvalidAssertionArgument,
    PythonDict,
    expect,
)
from .context import assertions_collector
from .predicates import CountPredicate, count, count_where
from .version import __version__


__all__ = [
    # Entry point
    "expect",
    "PythonDict",
    "AndConstraint",
    # Errors and results
    "AssertionFailedError",
    "InvalidAssertionArgument",
    "AssertionResult",
    "assertions_collector",
    # Count predicates
    "CountPredicate",
    "count",
    "count_where",
    "__version__",
]
