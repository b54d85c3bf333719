"""LinkVariant model (UNO: single model)."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .LinkInfo import LinkInfo
from .LinkPolicy import DEFAULT_POLICY, LinkPolicy


@dataclass(frozen=True, order=True)
class LinkVariant:
    """A LinkInfo paired with the policy that classifies it.

    Structural views (path, file name, extension) come from the wrapped
    link. Classification comes from the policy. Derived links keep the
    policy. Variants order and compare by their link only.
    """

    link: LinkInfo
    policy: LinkPolicy = field(default=DEFAULT_POLICY, compare=False)

    def __str__(self):
        return str(self.link)

    @property
    def kind(self) -> str:
        return self.policy.name

    @property
    def full_path(self) -> str:
        return self.link.full_path

    @property
    def file_path(self) -> str:
        return self.link.file_path

    @property
    def file_path_no_ext(self) -> str:
        return self.link.file_path_no_ext

    @property
    def path(self) -> str:
        return self.link.path

    @property
    def file_name(self) -> str:
        return self.link.file_name

    @property
    def file_name_no_ext(self) -> str:
        return self.link.file_name_no_ext

    @property
    def ext(self) -> str:
        return self.link.ext

    @property
    def has_ext(self) -> bool:
        return self.link.has_ext

    @property
    def is_empty(self) -> bool:
        return self.link.is_empty

    @property
    def is_relative(self) -> bool:
        return self.policy.is_relative(self.link)

    @property
    def is_local(self) -> bool:
        return self.policy.is_local(self.link)

    @property
    def is_external(self) -> bool:
        return self.policy.is_external(self.link)

    @property
    def is_uri(self) -> bool:
        return self.policy.is_uri(self.link)

    @property
    def is_absolute(self) -> bool:
        return self.policy.is_absolute(self.link)

    def target_file(self) -> LinkInfo:
        return self.policy.target_file(self.link)

    def with_ext(self, ext: str | None) -> "LinkVariant":
        return LinkVariant(self.link.with_ext(ext), self.policy)

    def append(self, *parts: str) -> "LinkVariant":
        return self.append_all(parts)

    def append_all(self, parts: Iterable[str]) -> "LinkVariant":
        return LinkVariant(self.link.append_all(parts), self.policy)
