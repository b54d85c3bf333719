"""LinkInfo value object (UNO: single model)."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .append_parts import append_parts
from .clean_full_path import clean_full_path
from .is_absolute import is_absolute
from .is_ext_in import is_ext_in
from .is_external import is_external
from .is_image_ext import is_image_ext
from .is_local import is_local
from .is_markdown_ext import is_markdown_ext
from .is_relative import is_relative
from .is_uri import is_uri
from .is_wiki_page_ext import is_wiki_page_ext
from .name_bounds import name_bounds


@dataclass(frozen=True, order=True, repr=False)
class LinkInfo:
    """Immutable canonical link path with name and extension boundaries.

    The constructor accepts any raw path-like string (or None) and never
    raises. full_path always holds the canonical form; equality, hashing
    and ordering compare full_path only.

    Examples:
        >>> link = LinkInfo("./docs/guide.md")
        >>> link.path, link.file_name_no_ext, link.ext
        ('docs/', 'guide', 'md')
    """

    full_path: str
    name_start: int = field(init=False, compare=False)
    name_end: int = field(init=False, compare=False)

    def __post_init__(self):
        canonical = clean_full_path(self.full_path)
        name_start, name_end = name_bounds(canonical)
        object.__setattr__(self, "full_path", canonical)
        object.__setattr__(self, "name_start", name_start)
        object.__setattr__(self, "name_end", name_end)

    def __str__(self):
        return self.full_path

    def __repr__(self):
        return f"LinkInfo('{self.full_path}')"

    @classmethod
    def from_parts(cls, full_path: str | None, *parts: str) -> "LinkInfo":
        """Build a link by appending parts to full_path (see append_parts)."""
        return cls(append_parts(full_path, parts))

    # Structural views

    @property
    def file_path(self) -> str:
        return self.full_path

    @property
    def file_path_no_ext(self) -> str:
        return self.full_path[: self.name_end]

    @property
    def path(self) -> str:
        """Directory portion including its trailing "/", empty without one."""
        return self.full_path[: self.name_start]

    @property
    def file_name(self) -> str:
        return self.full_path[self.name_start :]

    @property
    def file_name_no_ext(self) -> str:
        return self.full_path[self.name_start : self.name_end]

    @property
    def ext(self) -> str:
        """Extension without the leading dot, empty if none."""
        return self.full_path[self.name_end + 1 :]

    @property
    def has_ext(self) -> bool:
        return self.name_end + 1 < len(self.full_path)

    @property
    def is_empty(self) -> bool:
        return not self.full_path

    @property
    def is_root(self) -> bool:
        return self.full_path == "/"

    # Classification

    @property
    def is_relative(self) -> bool:
        """Needs resolving against a base to become absolute."""
        return is_relative(self.full_path)

    @property
    def is_local(self) -> bool:
        """Resolves to a local reference, if it resolves."""
        return is_local(self.full_path)

    @property
    def is_external(self) -> bool:
        """Resolves to an external reference, if it resolves."""
        return is_external(self.full_path)

    @property
    def is_uri(self) -> bool:
        return is_uri(self.full_path)

    @property
    def is_absolute(self) -> bool:
        """Already absolute; only needs mapping, not resolving."""
        return is_absolute(self.full_path)

    # Extension checks

    def is_ext_in(self, *candidates: str, ignore_case: bool = True) -> bool:
        return is_ext_in(self.ext, ignore_case, candidates)

    @property
    def is_image_ext(self) -> bool:
        return is_image_ext(self.ext)

    @property
    def is_markdown_ext(self) -> bool:
        return is_markdown_ext(self.ext)

    @property
    def is_wiki_page_ext(self) -> bool:
        return is_wiki_page_ext(self.ext)

    # Substring queries

    def contains(self, text: str, ignore_case: bool = False) -> bool:
        return _contains(self.full_path, text, ignore_case)

    def contains_spaces(self) -> bool:
        return self.contains(" ")

    def contains_anchor(self) -> bool:
        return self.contains("#")

    def path_contains(self, text: str, ignore_case: bool = False) -> bool:
        return _contains(self.path, text, ignore_case)

    def path_contains_spaces(self) -> bool:
        return self.path_contains(" ")

    def path_contains_anchor(self) -> bool:
        return self.path_contains("#")

    def file_name_contains(self, text: str, ignore_case: bool = False) -> bool:
        return _contains(self.file_name, text, ignore_case)

    def file_name_contains_spaces(self) -> bool:
        return self.file_name_contains(" ")

    def file_name_contains_anchor(self) -> bool:
        return self.file_name_contains("#")

    # Path algebra

    def with_ext(self, ext: str | None) -> "LinkInfo":
        """Return the link with its extension replaced by ext.

        ext may be given with or without its leading dot. Returns self when
        the link is empty, ext is None, or the extension already matches.
        """
        if ext is None or self.is_empty:
            return self
        bare_ext = ext.removeprefix(".")
        if self.ext == bare_ext:
            return self
        return LinkInfo(f"{self.file_path_no_ext}.{bare_ext}")

    def append(self, *parts: str) -> "LinkInfo":
        """Append path segments, resolving "." and ".." textually."""
        return self.append_all(parts)

    def append_all(self, parts: Iterable[str]) -> "LinkInfo":
        return LinkInfo(append_parts(self.full_path, parts))


def _contains(haystack: str, needle: str, ignore_case: bool) -> bool:
    if ignore_case:
        return needle.lower() in haystack.lower()
    return needle in haystack
