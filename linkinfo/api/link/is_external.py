"""Check whether a link points outside the local system."""

from ._constants import EXTERNAL_PREFIXES
from .starts_with_any import starts_with_any


def is_external(full_path: str | None) -> bool:
    """True for http, https, ftp and mailto references."""
    return starts_with_any(full_path, EXTERNAL_PREFIXES)
