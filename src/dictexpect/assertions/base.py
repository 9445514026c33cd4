from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

AssertionsT = TypeVar("AssertionsT")


@dataclass(frozen=True, slots=True)
class AndConstraint(Generic[AssertionsT]):
    """Handle returned by every passing assertion so calls can be chained.

    Attributes
    ----------
    and_ : AssertionsT
        The assertions object that just succeeded. Named with a trailing
        underscore because ``and`` is a keyword.

    Examples
    --------
    >>> expect({"a": 1}).contain_key("a").and_.have_count(1)  # doctest: +SKIP
    """

    and_: AssertionsT
