"""Rendering of values and reason clauses for failure messages."""

from collections.abc import Mapping, MappingView, Sequence, Set
from itertools import islice
from typing import Any

from dictexpect.config import DisplaySettings, get_display_settings

NULL_TOKEN = "<null>"
ELLIPSIS = "..."


class Verbatim(str):
    """Text that is substituted into a message as-is, without quoting."""

    __slots__ = ()


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def _join(parts: list[str], total: int, limit: int) -> str:
    if total > limit:
        parts = [*parts[:limit], ELLIPSIS]
    return ", ".join(parts)


def _render(value: Any, settings: DisplaySettings, active: frozenset[int]) -> str:
    if value is None:
        return NULL_TOKEN
    if isinstance(value, Verbatim):
        return str(value)
    if isinstance(value, str):
        return _truncate(f'"{value}"', settings.max_value_length)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _truncate(repr(value), settings.max_value_length)

    # Only sized, re-iterable containers are expanded; iterators and
    # generators fall through to repr() so rendering never consumes them.
    if isinstance(value, Mapping):
        if id(value) in active:
            return "{...}"
        inner = active | {id(value)}
        parts = [
            f"{_render(k, settings, inner)}: {_render(v, settings, inner)}"
            for k, v in islice(value.items(), settings.max_items)
        ]
        return "{" + _join(parts, len(value), settings.max_items) + "}"
    if isinstance(value, Set):
        if id(value) in active:
            return "{...}"
        inner = active | {id(value)}
        rendered = sorted(_render(item, settings, inner) for item in value)
        return "{" + _join(rendered[: settings.max_items], len(rendered), settings.max_items) + "}"
    if isinstance(value, (Sequence, MappingView)):
        if id(value) in active:
            return "[...]"
        inner = active | {id(value)}
        parts = [_render(item, settings, inner) for item in islice(value, settings.max_items)]
        return "[" + _join(parts, len(value), settings.max_items) + "]"
    return _truncate(repr(value), settings.max_value_length)


def format_value(value: Any) -> str:
    """Render a value for display inside a failure message.

    Parameters
    ----------
    value
        Any object. ``None`` renders as ``<null>``, strings are quoted,
        mappings render as ``{k: v, ...}`` in iteration order, sets render
        as ``{a, b}`` sorted by their display text, and sequences and
        dictionary views as ``[a, b]`` in iteration order. Anything else,
        including iterators and generators, renders with ``repr()``.

    Returns
    -------
    str
        Display text. Collections longer than the configured ``max_items``
        are cut short with a trailing ``...``; a container nested inside
        itself renders as ``{...}`` or ``[...]``.
    """
    return _render(value, get_display_settings(), frozenset())


def format_reason(reason: str = "", reason_args: tuple[Any, ...] = ()) -> str:
    """Render the reason clause appended to a failure message.

    The phrase is formatted with ``reason_args`` using ``str.format``
    placeholders. If it does not already start with ``because`` the word is
    prepended. An empty reason renders as an empty string.

    >>> format_reason("we said {0}", ("so",))
    ' because we said so'
    >>> format_reason("")
    ''
    """
    if not reason or not reason.strip():
        return ""

    phrase = reason.format(*reason_args) if reason_args else reason
    phrase = phrase.strip()
    if not phrase.lower().startswith("because"):
        phrase = f"because {phrase}"
    return f" {phrase}"


def render_message(message: str, values: list[str]) -> str:
    """Substitute pre-rendered display strings into indexed placeholders."""
    return message.format(*values)
