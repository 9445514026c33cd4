"""Deterministic assertion implementations."""

from dictexpect.assertions.deterministic.python_dict import PythonDict, expect, values_equal

__all__ = [
    "PythonDict",
    "expect",
    "values_equal",
]
