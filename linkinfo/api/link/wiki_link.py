"""Build a wiki link variant."""

from .LinkInfo import LinkInfo
from .LinkVariant import LinkVariant
from .WikiLinkPolicy import WIKI_POLICY


def wiki_link(target: str | None) -> LinkVariant:
    """Wrap a wiki link target ([[target]]) with the wiki classification policy."""
    return LinkVariant(LinkInfo(target), WIKI_POLICY)
