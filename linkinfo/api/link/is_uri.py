"""Check whether a link carries a URI scheme."""

from ._constants import URI_PREFIXES
from .starts_with_any import starts_with_any


def is_uri(full_path: str | None) -> bool:
    """True for file:// and external URI references."""
    return starts_with_any(full_path, URI_PREFIXES)
