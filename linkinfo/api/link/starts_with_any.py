"""Prefix matching primitive."""

from collections.abc import Iterable


def starts_with_any(text: str | None, prefixes: Iterable[str]) -> bool:
    """Return True if text starts with one of prefixes. None never matches."""
    if text is None:
        return False
    return any(text.startswith(prefix) for prefix in prefixes)
