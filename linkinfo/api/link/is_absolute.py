"""Check whether a link is absolute."""

from ._constants import ABSOLUTE_PREFIXES
from .starts_with_any import starts_with_any


def is_absolute(full_path: str | None) -> bool:
    """True if the link needs no resolution against a base ("/" or a URI scheme)."""
    return starts_with_any(full_path, ABSOLUTE_PREFIXES)
