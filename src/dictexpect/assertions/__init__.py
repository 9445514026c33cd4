"""Assertion library for dictionary subjects."""

from dictexpect.assertions._base import (
    AssertionFailedError,
    AssertionMetadata,
    AssertionResult,
    InvalidAssertionArgument,
    fail,
    verify,
)
from dictexpect.assertions.base import AndConstraint
from dictexpect.assertions.deterministic import PythonDict, expect
from dictexpect.assertions.formatting import Verbatim, format_reason, format_value

__all__ = [
    "AndConstraint",
    "AssertionFailedError",
    "AssertionMetadata",
    "AssertionResult",
    "InvalidAssertionArgument",
    "PythonDict",
    "Verbatim",
    "expect",
    "fail",
    "format_reason",
    "format_value",
    "verify",
]
