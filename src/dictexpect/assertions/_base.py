"""Verification primitive, result types and error classes."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, NoReturn
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from dictexpect.assertions.formatting import format_reason, format_value, render_message
from dictexpect.config import get_display_settings
from dictexpect.context import get_assertions_collector

logger = logging.getLogger(__name__)

Condition = bool | Callable[[], bool]


class AssertionMetadata(BaseModel):
    """Metadata for an evaluated assertion.

    Attributes
    ----------
    name : str
        Human-readable assertion identifier (usually the method name).
    uuid : UUID
        Unique identifier for this evaluation instance.
    timestamp : datetime
        UTC timestamp when the assertion was evaluated.
    expected : str
        Display text of the expected value.
    actual : str
        Display text of the subject or actual value.
    """

    name: str
    uuid: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    expected: str
    actual: str


class AssertionResult(BaseModel):
    """Result of a single verification.

    Attributes
    ----------
    metadata : AssertionMetadata
        Contextual details about the evaluated assertion.
    passed : bool
        Whether the condition held.
    message : str | None
        Fully rendered failure message; None when the assertion passed.
    """

    metadata: AssertionMetadata
    passed: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.passed


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionResult."""

    def __init__(self, result: AssertionResult):
        self.assertion_result = result
        super().__init__(result.message or f"{result.metadata.name} failed")

    @property
    def message(self) -> str:
        return str(self)


class InvalidAssertionArgument(ValueError):
    """Raised when an assertion is called with an argument it cannot work with.

    This signals a defect in the test itself (a ``None`` predicate, an empty
    set of keys to look for, ...) rather than a violated expectation.
    """


def _record(result: AssertionResult) -> None:
    if not get_display_settings().record_results:
        return
    if (collector := get_assertions_collector()) is not None:
        collector.append(result)


def _build_result(
    *,
    name: str,
    passed: bool,
    message: str,
    expected: Any,
    actual: Any,
    extra: tuple[Any, ...],
    reason: str,
    reason_args: tuple[Any, ...],
) -> AssertionResult:
    expected_text = format_value(expected)
    actual_text = format_value(actual)
    rendered = None
    if not passed:
        values = [
            expected_text,
            actual_text,
            format_reason(reason, reason_args),
            *(format_value(value) for value in extra),
        ]
        rendered = render_message(message, values)
    return AssertionResult(
        metadata=AssertionMetadata(name=name, expected=expected_text, actual=actual_text),
        passed=passed,
        message=rendered,
    )


def verify(
    condition: Condition,
    message: str,
    expected: Any = None,
    actual: Any = None,
    *extra: Any,
    reason: str = "",
    reason_args: tuple[Any, ...] = (),
    name: str = "verify",
) -> None:
    """Evaluate a condition and raise if it does not hold.

    Parameters
    ----------
    condition : bool or Callable[[], bool]
        Outcome to check. A callable is evaluated exactly once, here.
    message : str
        Template with indexed placeholders: ``{0}`` expected, ``{1}`` actual,
        ``{2}`` reason clause and ``{3}`` onwards for ``extra``.
    expected, actual : Any
        Values substituted for ``{0}`` and ``{1}``.
    *extra : Any
        Additional context values substituted for ``{3}`` and up.
    reason : str
        Optional phrase explaining why the assertion is needed.
    reason_args : tuple
        Positional arguments formatted into ``reason``.
    name : str
        Identifier recorded on the result.

    Raises
    ------
    AssertionFailedError
        If the condition is falsy.
    """
    passed = bool(condition() if callable(condition) else condition)

    if passed and (not get_display_settings().record_results or get_assertions_collector() is None):
        return

    result = _build_result(
        name=name,
        passed=passed,
        message=message,
        expected=expected,
        actual=actual,
        extra=extra,
        reason=reason,
        reason_args=reason_args,
    )
    _record(result)
    if not passed:
        logger.debug("Assertion %s failed: %s", name, result.message)
        raise AssertionFailedError(result)


def fail(
    message: str,
    expected: Any = None,
    actual: Any = None,
    *extra: Any,
    reason: str = "",
    reason_args: tuple[Any, ...] = (),
    name: str = "fail",
) -> NoReturn:
    """Unconditionally raise a failure rendered from ``message``.

    Takes the same arguments as :func:`verify`, minus the condition.
    """
    result = _build_result(
        name=name,
        passed=False,
        message=message,
        expected=expected,
        actual=actual,
        extra=extra,
        reason=reason,
        reason_args=reason_args,
    )
    _record(result)
    logger.debug("Assertion %s failed: %s", name, result.message)
    raise AssertionFailedError(result)
