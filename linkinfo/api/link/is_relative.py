"""Check whether a link is relative."""

from .is_absolute import is_absolute


def is_relative(full_path: str | None) -> bool:
    """True if the link must be resolved against a base path.

    Relative is defined as "not absolute"; None is neither.
    """
    return full_path is not None and not is_absolute(full_path)
