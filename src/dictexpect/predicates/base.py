"""Count predicates with human-readable descriptions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CountPredicate:
    """A condition on a number of items together with its description.

    The description is what failure messages print in place of the
    condition, e.g. ``count > 3``.

    Attributes
    ----------
    condition
        Callable taking the actual count and returning a truthy value when
        the count is acceptable.
    description
        Human-readable rendering of ``condition``.

    Notes
    -----
    - ``&``, ``|`` and ``~`` combine predicates and their descriptions.
    - ``str(predicate)`` is the description.
    """

    condition: Callable[[int], bool]
    description: str

    def __call__(self, actual_count: int) -> bool:
        return bool(self.condition(actual_count))

    def __str__(self) -> str:
        return self.description

    def __and__(self, other: CountPredicate) -> CountPredicate:
        return CountPredicate(
            lambda n: self(n) and other(n),
            f"{self.description} and {other.description}",
        )

    def __or__(self, other: CountPredicate) -> CountPredicate:
        return CountPredicate(
            lambda n: self(n) or other(n),
            f"{self.description} or {other.description}",
        )

    def __invert__(self) -> CountPredicate:
        return CountPredicate(lambda n: not self(n), f"not ({self.description})")


class CountExpression:
    """Builds :class:`CountPredicate` objects from comparison expressions.

    Example:
        >>> from dictexpect.predicates import count
        >>> predicate = count > 3
        >>> predicate.description
        'count > 3'
        >>> predicate(4)
        True
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str = "count") -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name

    def __gt__(self, other: int) -> CountPredicate:
        return CountPredicate(lambda n: n > other, f"{self.name} > {other}")

    def __ge__(self, other: int) -> CountPredicate:
        return CountPredicate(lambda n: n >= other, f"{self.name} >= {other}")

    def __lt__(self, other: int) -> CountPredicate:
        return CountPredicate(lambda n: n < other, f"{self.name} < {other}")

    def __le__(self, other: int) -> CountPredicate:
        return CountPredicate(lambda n: n <= other, f"{self.name} <= {other}")

    def __eq__(self, other: object) -> CountPredicate:  # type: ignore[override]
        return CountPredicate(lambda n: n == other, f"{self.name} == {other}")

    def __ne__(self, other: object) -> CountPredicate:  # type: ignore[override]
        return CountPredicate(lambda n: n != other, f"{self.name} != {other}")

    def between(self, low: int, high: int) -> CountPredicate:
        """Inclusive range check, described as ``low <= count <= high``."""
        return CountPredicate(lambda n: low <= n <= high, f"{low} <= {self.name} <= {high}")


count = CountExpression()


def count_where(fn: Callable[[int], bool], description: str | None = None) -> CountPredicate:
    """Wrap an arbitrary callable as a count predicate.

    Args:
        fn: Callable taking the count and returning bool.
        description: Text printed in failure messages. Defaults to the
            callable's ``__name__``.

    Returns:
        A CountPredicate around ``fn``.
    """
    if description is None:
        description = getattr(fn, "__name__", repr(fn))
    return CountPredicate(fn, description)
