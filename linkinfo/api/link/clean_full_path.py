"""Canonicalize a raw link path."""

from .remove_dot_directory import remove_dot_directory


def clean_full_path(path: str | None) -> str:
    """Produce the canonical form every other link operation assumes.

    Steps, each applied once:
    1. remove "/./" segments and a leading "./"
    2. strip one trailing "/" unless the path ends with "//"
    3. strip one trailing "."

    Never raises; None becomes the empty string.

    Examples:
        >>> clean_full_path("./docs/./index.md")
        'docs/index.md'
        >>> clean_full_path("docs/")
        'docs'
        >>> clean_full_path("//")
        '//'
    """
    cleaned = remove_dot_directory(path)
    if not cleaned.endswith("//"):
        cleaned = cleaned.removesuffix("/")
    return cleaned.removesuffix(".")
