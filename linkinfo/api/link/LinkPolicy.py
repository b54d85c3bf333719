"""Default link classification policy."""

from .LinkInfo import LinkInfo


class LinkPolicy:
    """Classifies a link by its prefix.

    Variants subclass this and override the queries they answer differently;
    the structural views always come from the wrapped LinkInfo.
    """

    name = "link"

    def is_relative(self, link: LinkInfo) -> bool:
        return link.is_relative

    def is_local(self, link: LinkInfo) -> bool:
        return link.is_local

    def is_external(self, link: LinkInfo) -> bool:
        return link.is_external

    def is_uri(self, link: LinkInfo) -> bool:
        return link.is_uri

    def is_absolute(self, link: LinkInfo) -> bool:
        return link.is_absolute

    def target_file(self, link: LinkInfo) -> LinkInfo:
        """File the link refers to; the link itself by default."""
        return link

    def __repr__(self):
        return f"{type(self).__name__}()"


DEFAULT_POLICY = LinkPolicy()
