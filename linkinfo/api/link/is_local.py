"""Check whether a link resolves locally."""

from ._constants import LOCAL_PREFIXES
from .is_relative import is_relative
from .starts_with_any import starts_with_any


def is_local(full_path: str | None) -> bool:
    """True if the link resolves inside the local workspace, if it resolves at all.

    Every relative link is local. So is anything prefixed with "file:" or "/".
    A link can be both local and absolute.
    """
    return starts_with_any(full_path, LOCAL_PREFIXES) or is_relative(full_path)
