"""Predicates used by count assertions."""

from .base import CountExpression, CountPredicate, count, count_where

__all__ = [
    "CountExpression",
    "CountPredicate",
    "count",
    "count_where",
]
