"""Check for a wiki page extension."""

from collections.abc import Iterable

from .file_type_registry import get_file_types
from .is_ext_in import is_ext_in


def is_wiki_page_ext(ext: str, ignore_case: bool = True, extensions: Iterable[str] | None = None) -> bool:
    """True if ext is a recognized wiki page extension (registered file types unless given)."""
    if extensions is None:
        extensions = get_file_types().wiki_page
    return is_ext_in(ext, ignore_case, extensions)
