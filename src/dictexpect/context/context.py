from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from dictexpect.assertions._base import AssertionResult


ASSERTION_RESULTS_COLLECTOR: ContextVar[list[AssertionResult] | None] = ContextVar(
    "assertion_results_collector", default=None
)


def get_assertions_collector() -> list[AssertionResult] | None:
    """Get the currently bound results list, or None outside a collector scope."""
    return ASSERTION_RESULTS_COLLECTOR.get()


@contextmanager
def assertions_collector(ctx: list[AssertionResult]) -> Iterator[None]:
    """Temporarily bind `ctx` as the list receiving every assertion result.

    Parameters
    ----------
    ctx : list[AssertionResult]
        Results of passing and failing evaluations are appended here for the
        duration of the ``with`` block.
    """
    token = ASSERTION_RESULTS_COLLECTOR.set(ctx)
    try:
        yield
    finally:
        ASSERTION_RESULTS_COLLECTOR.reset(token)
