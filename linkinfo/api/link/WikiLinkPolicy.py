"""Classification policy for wiki page references."""

from ._constants import WIKI_PAGE_EXTENSION
from .LinkInfo import LinkInfo
from .LinkPolicy import LinkPolicy


class WikiLinkPolicy(LinkPolicy):
    """Wiki links ([[Page]]) always name a page inside the wiki.

    They are relative to the wiki home and never external, URI or absolute,
    whatever their text looks like.
    """

    name = "wiki"

    def is_relative(self, link: LinkInfo) -> bool:
        return True

    def is_local(self, link: LinkInfo) -> bool:
        return True

    def is_external(self, link: LinkInfo) -> bool:
        return False

    def is_uri(self, link: LinkInfo) -> bool:
        return False

    def is_absolute(self, link: LinkInfo) -> bool:
        return False

    def target_file(self, link: LinkInfo) -> LinkInfo:
        """Page file for the link: extension-less pages map to WIKI_PAGE_EXTENSION."""
        if link.is_empty or link.is_wiki_page_ext:
            return link
        return LinkInfo(link.full_path + WIKI_PAGE_EXTENSION)


WIKI_POLICY = WikiLinkPolicy()
