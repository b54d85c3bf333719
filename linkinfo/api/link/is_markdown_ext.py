"""Check for a markdown extension."""

from collections.abc import Iterable

from .file_type_registry import get_file_types
from .is_ext_in import is_ext_in


def is_markdown_ext(ext: str, ignore_case: bool = True, extensions: Iterable[str] | None = None) -> bool:
    """True if ext is a recognized markdown extension.

    Args:
        ext: Extension without the leading dot
        ignore_case: Compare case-insensitively (default)
        extensions: Explicit extension set; the registered file types are used when omitted
    """
    if extensions is None:
        extensions = get_file_types().markdown
    return is_ext_in(ext, ignore_case, extensions)
