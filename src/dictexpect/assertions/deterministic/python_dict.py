"""Assertions for dict objects."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from dictexpect.assertions._base import InvalidAssertionArgument, fail, verify
from dictexpect.assertions.base import AndConstraint
from dictexpect.assertions.formatting import Verbatim
from dictexpect.predicates.base import CountPredicate, count_where

NOT_INITIALIZED = "but found {1} (the dictionary was not initialized)."


def values_equal(left: Any, right: Any) -> bool:
    """Compare two values; ``None`` only ever equals ``None``."""
    if left is None or right is None:
        return left is right
    return bool(left == right)


def _distinct(items: Iterable[Any]) -> list[Any]:
    """Drop repeated items by equality, keeping first occurrences in order."""
    unique: list[Any] = []
    for item in items:
        if not any(values_equal(item, seen) for seen in unique):
            unique.append(item)
    return unique


def _contains_equal(haystack: list[Any], needle: Any) -> bool:
    return any(values_equal(needle, item) for item in haystack)


def _has_key(mapping: Mapping[Any, Any], key: Any) -> bool:
    """Key membership; an unhashable key is looked up by equality instead."""
    try:
        return key in mapping
    except TypeError:
        return any(values_equal(key, candidate) for candidate in mapping)


def _require_mapping(value: Any, argument: str) -> Mapping[Any, Any]:
    if value is None:
        raise InvalidAssertionArgument("Cannot compare dictionary with <null>.")
    if not isinstance(value, Mapping):
        raise InvalidAssertionArgument(
            f"Cannot compare dictionary with a {type(value).__name__}; pass a mapping as {argument!r}."
        )
    return value


def _collect(items: tuple[Any, ...]) -> list[Any] | None:
    """Normalize varargs; a lone non-string iterable is expanded."""
    if len(items) == 1:
        only = items[0]
        if only is None:
            return None
        if isinstance(only, Iterable) and not isinstance(only, (str, bytes)):
            return list(only)
    return list(items)


class PythonDict:
    """Assertions for dictionary subjects.

    Wraps a mapping (or ``None`` for a dictionary that was never initialized)
    and exposes chainable checks on its size, keys and values. Every passing
    check returns an :class:`AndConstraint`; a failing one raises
    :class:`~dictexpect.assertions._base.AssertionFailedError`.

    Parameters
    ----------
    subject : Mapping or None
        The dictionary under test. It is read on every call, never copied.

    Examples
    --------
    >>> assertion = PythonDict({"name": "Alice", "age": 30})
    >>> assertion.contain_key("name").and_.have_count(2)  # passes
    >>> assertion.equal({"name": "Bob"})  # raises AssertionFailedError
    """

    def __init__(self, subject: Mapping[Any, Any] | None):
        if subject is not None and not isinstance(subject, Mapping):
            raise InvalidAssertionArgument(
                f"PythonDict expects a mapping, got {type(subject).__name__}."
            )
        self.subject = subject

    def __call__(self, expected: Mapping[Any, Any], reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Shorthand for :meth:`equal`."""
        return self.equal(expected, reason, *reason_args)

    def __repr__(self) -> str:
        return f"PythonDict({self.subject!r})"

    def _and(self) -> AndConstraint[PythonDict]:
        return AndConstraint(self)

    def _fail_if_absent(
        self,
        message: str,
        expected: Any,
        reason: str,
        reason_args: tuple[Any, ...],
        name: str,
        *extra: Any,
    ) -> Mapping[Any, Any]:
        if self.subject is None:
            fail(message, expected, None, *extra, reason=reason, reason_args=reason_args, name=name)
        return self.subject

    # Nullity

    def be_null(self, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has not been initialized."""
        verify(
            self.subject is None,
            "Expected dictionary to be <null>{2}, but found {1}.",
            None,
            self.subject,
            reason=reason,
            reason_args=reason_args,
            name="be_null",
        )
        return self._and()

    def not_be_null(self, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has been initialized."""
        verify(
            self.subject is not None,
            "Expected dictionary not to be <null>{2}, " + NOT_INITIALIZED,
            None,
            self.subject,
            reason=reason,
            reason_args=reason_args,
            name="not_be_null",
        )
        return self._and()

    # Size

    def have_count(
        self,
        expected: int | CountPredicate | Callable[[int], bool],
        reason: str = "",
        *reason_args: Any,
    ) -> AndConstraint[PythonDict]:
        """Assert the number of items in the dictionary.

        Parameters
        ----------
        expected : int, CountPredicate or Callable[[int], bool]
            Either the exact number of items, or a predicate the number of
            items must satisfy. Use :data:`dictexpect.predicates.count` to
            build predicates that describe themselves, e.g. ``count > 3``.
        reason : str
            Optional phrase explaining why the assertion is needed.
        *reason_args
            Values formatted into ``reason``.

        Raises
        ------
        InvalidAssertionArgument
            If ``expected`` is None or neither an int nor a callable.
        AssertionFailedError
            If the dictionary is None or its size does not match.
        """
        if expected is None:
            raise InvalidAssertionArgument("Cannot compare dictionary count against a <null> predicate.")
        if isinstance(expected, bool) or not (isinstance(expected, int) or callable(expected)):
            raise InvalidAssertionArgument(
                f"Expected an item count or a count predicate, got {type(expected).__name__}."
            )

        if isinstance(expected, int):
            subject = self._fail_if_absent(
                "Expected {0} item(s){2}, " + NOT_INITIALIZED, expected, reason, reason_args, "have_count"
            )
            actual_count = len(subject)
            verify(
                actual_count == expected,
                "Expected {0} item(s){2}, but found {1}.",
                expected,
                actual_count,
                reason=reason,
                reason_args=reason_args,
                name="have_count",
            )
            return self._and()

        predicate = expected if isinstance(expected, CountPredicate) else count_where(expected)
        description = Verbatim(predicate.description)
        subject = self._fail_if_absent(
            "Expected dictionary to have a count matching {0}{2}, " + NOT_INITIALIZED,
            description,
            reason,
            reason_args,
            "have_count",
        )
        actual_count = len(subject)
        verify(
            lambda: predicate(actual_count),
            "Expected dictionary {1} to have a count matching {0}{2}, but count is {3}.",
            description,
            subject,
            actual_count,
            reason=reason,
            reason_args=reason_args,
            name="have_count",
        )
        return self._and()

    def be_empty(self, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has no items."""
        subject = self._fail_if_absent(
            "Expected dictionary to be empty{2}, " + NOT_INITIALIZED, None, reason, reason_args, "be_empty"
        )
        verify(
            len(subject) == 0,
            "Expected no items{2}, but found {3} item(s): {1}.",
            None,
            subject,
            len(subject),
            reason=reason,
            reason_args=reason_args,
            name="be_empty",
        )
        return self._and()

    def not_be_empty(self, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has at least one item."""
        subject = self._fail_if_absent(
            "Expected dictionary not to be empty{2}, " + NOT_INITIALIZED,
            None,
            reason,
            reason_args,
            "not_be_empty",
        )
        verify(
            len(subject) > 0,
            "Expected one or more items{2}, but found {1}.",
            None,
            subject,
            reason=reason,
            reason_args=reason_args,
            name="not_be_empty",
        )
        return self._and()

    # Equality

    def equal(self, expected: Mapping[Any, Any], reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has the same keys and values as ``expected``.

        Missing keys are reported before additional keys; if the key sets
        match, the first key (in ``expected`` order) whose values differ is
        reported. Nested values are compared with ``==``, not recursively.

        Raises
        ------
        InvalidAssertionArgument
            If ``expected`` is None or not a mapping.
        AssertionFailedError
            If the dictionary is None or differs from ``expected``.
        """
        _require_mapping(expected, "expected")

        subject = self._fail_if_absent(
            "Expected dictionary to be equal to {0}{2}, " + NOT_INITIALIZED, expected, reason, reason_args, "equal"
        )

        missing_keys = [key for key in expected if not _has_key(subject, key)]
        verify(
            not missing_keys,
            "Expected dictionary to be equal to {0}{2}, but could not find keys {3}.",
            expected,
            subject,
            missing_keys,
            reason=reason,
            reason_args=reason_args,
            name="equal",
        )

        additional_keys = [key for key in subject if not _has_key(expected, key)]
        verify(
            not additional_keys,
            "Expected dictionary to be equal to {0}{2}, but found additional keys {3}.",
            expected,
            subject,
            additional_keys,
            reason=reason,
            reason_args=reason_args,
            name="equal",
        )

        for key in expected:
            verify(
                values_equal(subject[key], expected[key]),
                "Expected dictionary to be equal to {0}{2}, but {1} differs at key {3}.",
                expected,
                subject,
                key,
                reason=reason,
                reason_args=reason_args,
                name="equal",
            )

        return self._and()

    def not_equal(self, unexpected: Mapping[Any, Any], reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary differs from ``unexpected`` in keys or values."""
        _require_mapping(unexpected, "unexpected")

        subject = self._fail_if_absent(
            "Expected dictionaries not to be equal{2}, " + NOT_INITIALIZED,
            unexpected,
            reason,
            reason_args,
            "not_equal",
        )

        found_difference = (
            any(not _has_key(subject, key) for key in unexpected)
            or any(not _has_key(unexpected, key) for key in subject)
            or any(
                not values_equal(subject[key], unexpected[key])
                for key in subject
                if _has_key(unexpected, key)
            )
        )
        verify(
            found_difference,
            "Did not expect dictionaries {0} and {1} to be equal{2}.",
            unexpected,
            subject,
            reason=reason,
            reason_args=reason_args,
            name="not_equal",
        )
        return self._and()

    # Keys

    def contain_key(self, expected: Any, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has the key ``expected``."""
        return self._contain_keys([expected], reason, reason_args)

    def contain_keys(self, *expected: Any, reason: str = "", reason_args: tuple[Any, ...] = ()) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has all of the given keys.

        Keys may be given as separate arguments or as a single iterable. To
        look up a single tuple key use :meth:`contain_key`.
        """
        return self._contain_keys(_collect(expected), reason, reason_args)

    def _contain_keys(
        self, expected: list[Any] | None, reason: str, reason_args: tuple[Any, ...]
    ) -> AndConstraint[PythonDict]:
        if expected is None:
            raise InvalidAssertionArgument("Cannot verify key containment against a <null> collection of keys.")
        if not expected:
            raise InvalidAssertionArgument("Cannot verify key containment against an empty collection of keys.")

        subject = self._fail_if_absent(
            "Expected dictionary to contain keys {0}{2}, " + NOT_INITIALIZED,
            expected,
            reason,
            reason_args,
            "contain_keys",
        )

        missing_keys = [key for key in _distinct(expected) if not _has_key(subject, key)]
        if len(expected) > 1:
            verify(
                not missing_keys,
                "Expected dictionary {1} to contain keys {0}{2}, but could not find {3}.",
                expected,
                subject,
                missing_keys,
                reason=reason,
                reason_args=reason_args,
                name="contain_keys",
            )
        else:
            verify(
                not missing_keys,
                "Expected dictionary {1} to contain key {0}{2}.",
                expected[0],
                subject,
                reason=reason,
                reason_args=reason_args,
                name="contain_key",
            )
        return self._and()

    def not_contain_key(self, unexpected: Any, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary does not have the key ``unexpected``."""
        subject = self._fail_if_absent(
            "Expected dictionary not to contain key {0}{2}, " + NOT_INITIALIZED,
            unexpected,
            reason,
            reason_args,
            "not_contain_key",
        )
        verify(
            not _has_key(subject, unexpected),
            "Dictionary {1} should not contain key {0}{2}, but found it anyhow.",
            unexpected,
            subject,
            reason=reason,
            reason_args=reason_args,
            name="not_contain_key",
        )
        return self._and()

    def not_contain_keys(
        self, *unexpected: Any, reason: str = "", reason_args: tuple[Any, ...] = ()
    ) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has none of the given keys."""
        keys = _collect(unexpected)
        if keys is None:
            raise InvalidAssertionArgument("Cannot verify key absence against a <null> collection of keys.")
        if not keys:
            raise InvalidAssertionArgument("Cannot verify key absence against an empty collection of keys.")

        subject = self._fail_if_absent(
            "Expected dictionary not to contain keys {0}{2}, " + NOT_INITIALIZED,
            keys,
            reason,
            reason_args,
            "not_contain_keys",
        )
        found_keys = [key for key in _distinct(keys) if _has_key(subject, key)]
        verify(
            not found_keys,
            "Dictionary {1} should not contain keys {0}{2}, but found {3}.",
            keys,
            subject,
            found_keys,
            reason=reason,
            reason_args=reason_args,
            name="not_contain_keys",
        )
        return self._and()

    # Values

    def contain_value(self, expected: Any, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has ``expected`` among its values."""
        return self._contain_values([expected], reason, reason_args)

    def contain_values(
        self, *expected: Any, reason: str = "", reason_args: tuple[Any, ...] = ()
    ) -> AndConstraint[PythonDict]:
        """Assert that the dictionary has all of the given values.

        Values may be given as separate arguments or as a single iterable.
        """
        return self._contain_values(_collect(expected), reason, reason_args)

    def _contain_values(
        self, expected: list[Any] | None, reason: str, reason_args: tuple[Any, ...]
    ) -> AndConstraint[PythonDict]:
        if expected is None:
            raise InvalidAssertionArgument("Cannot verify value containment against a <null> collection of values.")
        if not expected:
            raise InvalidAssertionArgument("Cannot verify value containment against an empty collection of values.")

        subject = self._fail_if_absent(
            "Expected dictionary to contain values {0}{2}, " + NOT_INITIALIZED,
            expected,
            reason,
            reason_args,
            "contain_values",
        )

        actual_values = list(subject.values())
        missing_values = [value for value in _distinct(expected) if not _contains_equal(actual_values, value)]
        if len(expected) > 1:
            verify(
                not missing_values,
                "Expected dictionary {1} to contain values {0}{2}, but could not find {3}.",
                expected,
                subject,
                missing_values,
                reason=reason,
                reason_args=reason_args,
                name="contain_values",
            )
        else:
            verify(
                not missing_values,
                "Expected dictionary {1} to contain value {0}{2}.",
                expected[0],
                subject,
                reason=reason,
                reason_args=reason_args,
                name="contain_value",
            )
        return self._and()

    def not_contain_value(self, unexpected: Any, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that ``unexpected`` is not among the dictionary's values."""
        subject = self._fail_if_absent(
            "Expected dictionary not to contain value {0}{2}, " + NOT_INITIALIZED,
            unexpected,
            reason,
            reason_args,
            "not_contain_value",
        )
        verify(
            lambda: not _contains_equal(list(subject.values()), unexpected),
            "Dictionary {1} should not contain value {0}{2}, but found it anyhow.",
            unexpected,
            subject,
            reason=reason,
            reason_args=reason_args,
            name="not_contain_value",
        )
        return self._and()

    def not_contain_values(
        self, *unexpected: Any, reason: str = "", reason_args: tuple[Any, ...] = ()
    ) -> AndConstraint[PythonDict]:
        """Assert that none of the given values appear in the dictionary."""
        values = _collect(unexpected)
        if values is None:
            raise InvalidAssertionArgument("Cannot verify value absence against a <null> collection of values.")
        if not values:
            raise InvalidAssertionArgument("Cannot verify value absence against an empty collection of values.")

        subject = self._fail_if_absent(
            "Expected dictionary not to contain values {0}{2}, " + NOT_INITIALIZED,
            values,
            reason,
            reason_args,
            "not_contain_values",
        )
        actual_values = list(subject.values())
        found_values = [value for value in _distinct(values) if _contains_equal(actual_values, value)]
        verify(
            not found_values,
            "Dictionary {1} should not contain values {0}{2}, but found {3}.",
            values,
            subject,
            found_values,
            reason=reason,
            reason_args=reason_args,
            name="not_contain_values",
        )
        return self._and()

    # Items

    def contain(self, key: Any, value: Any, reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that the dictionary maps ``key`` to ``value``."""
        subject = self._fail_if_absent(
            "Expected dictionary to have value {0} at key {3}{2}, " + NOT_INITIALIZED,
            value,
            reason,
            reason_args,
            "contain",
            key,
        )

        if not _has_key(subject, key):
            fail(
                "Expected {0} at key {3}{2}, but the key was not found.",
                value,
                None,
                key,
                reason=reason,
                reason_args=reason_args,
                name="contain",
            )

        actual = subject[key]
        verify(
            values_equal(actual, value),
            "Expected {0} at key {3}{2}, but found {1}.",
            value,
            actual,
            key,
            reason=reason,
            reason_args=reason_args,
            name="contain",
        )
        return self._and()

    def contain_items(self, expected: Mapping[Any, Any], reason: str = "", *reason_args: Any) -> AndConstraint[PythonDict]:
        """Assert that every key/value pair of ``expected`` is in the dictionary.

        Unlike :meth:`equal`, the dictionary may hold additional keys.
        """
        if expected is None:
            raise InvalidAssertionArgument("Cannot verify item containment against a <null> mapping.")
        if not isinstance(expected, Mapping):
            raise InvalidAssertionArgument(
                f"Cannot verify item containment against a {type(expected).__name__}; pass a mapping."
            )
        if not expected:
            raise InvalidAssertionArgument("Cannot verify item containment against an empty mapping.")

        subject = self._fail_if_absent(
            "Expected dictionary to contain items {0}{2}, " + NOT_INITIALIZED,
            expected,
            reason,
            reason_args,
            "contain_items",
        )

        for key, value in expected.items():
            verify(
                _has_key(subject, key),
                "Expected dictionary {1} to contain items {0}{2}, but could not find key {3}.",
                expected,
                subject,
                key,
                reason=reason,
                reason_args=reason_args,
                name="contain_items",
            )
            verify(
                values_equal(subject[key], value),
                "Expected dictionary {1} to contain items {0}{2}, but found {4} at key {3}.",
                expected,
                subject,
                key,
                subject[key],
                reason=reason,
                reason_args=reason_args,
                name="contain_items",
            )
        return self._and()


def expect(subject: Mapping[Any, Any] | None) -> PythonDict:
    """Wrap ``subject`` for fluent dictionary assertions.

    >>> expect({"a": 1}).contain("a", 1)  # doctest: +SKIP
    """
    return PythonDict(subject)
