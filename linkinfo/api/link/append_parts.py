"""Append path segments to a link path."""

from collections.abc import Iterable

from .clean_full_path import clean_full_path
from .name_bounds import name_bounds


def _parent(path: str) -> str:
    """Directory portion of path with its trailing slash removed."""
    canonical = clean_full_path(path)
    name_start, _ = name_bounds(canonical)
    return canonical[:name_start].removesuffix("/")


def append_parts(full_path: str | None, parts: Iterable[str]) -> str:
    """Fold parts onto full_path left to right and return the joined path.

    Each part loses one leading and one trailing "/", and one trailing "."
    unless it is "..". Empty and "." parts are skipped. ".." pops one
    segment off the running path; popping past the start leaves an empty
    path rather than failing. The result is not yet canonical.

    Examples:
        >>> append_parts("a/b", ["c", "..", "d"])
        'a/b/d'
        >>> append_parts("a", ["..", ".."])
        ''
    """
    path = clean_full_path(full_path)

    for part in parts:
        clean_part = part.removeprefix("/").removesuffix("/")
        if clean_part != "..":
            clean_part = clean_part.removesuffix(".")

        if clean_part in ("", "."):
            continue

        if clean_part == "..":
            path = _parent(path)
        else:
            if path and not path.endswith("/"):
                path += "/"
            path += clean_part

    return path
