"""Locate file name and extension boundaries in a canonical path."""


def name_bounds(path: str) -> tuple[int, int]:
    """Return (name_start, name_end) offsets for a canonical path.

    name_start is where the file name begins. For a path ending in "/"
    ("//", or "a/" from a raw "a/.") name_start is the index of that final
    slash, so the slash itself becomes the file name. name_end is the index
    of the extension dot, or len(path) when the name has no extension.
    """
    last_sep = path.rfind("/")
    if last_sep < 0:
        name_start = 0
    elif last_sep < len(path) - 1:
        name_start = last_sep + 1
    else:
        name_start = last_sep

    ext_start = path.rfind(".")
    name_end = len(path) if ext_start <= name_start else ext_start
    return name_start, name_end
