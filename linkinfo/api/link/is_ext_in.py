"""Extension set membership."""

from collections.abc import Iterable


def is_ext_in(ext: str, ignore_case: bool = True, candidates: Iterable[str] = ()) -> bool:
    """Return True if ext equals one of candidates.

    Args:
        ext: Extension without the leading dot
        ignore_case: Compare case-insensitively (default)
        candidates: Extensions to compare against, scanned in order
    """
    if ignore_case:
        lowered = ext.lower()
        return any(candidate.lower() == lowered for candidate in candidates)
    return any(candidate == ext for candidate in candidates)
