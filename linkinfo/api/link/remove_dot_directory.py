"""Remove current-directory segments from a path string."""


def remove_dot_directory(path: str | None) -> str:
    """Drop "/./" segments and a leading "./".

    This is a single replace pass, not a fixed point: "a/././b" becomes
    "a/./b" because the two occurrences overlap.

    Args:
        path: Raw path, may be None

    Returns:
        Path without dot-directory segments (empty string for None)
    """
    cleaned = (path or "").replace("/./", "/")
    return cleaned.removeprefix("./")
