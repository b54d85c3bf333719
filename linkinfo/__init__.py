"""Canonical path and link model for markdown and wiki references."""

from .api.link import LinkInfo, LinkVariant, wiki_link

__all__ = ["LinkInfo", "LinkVariant", "wiki_link"]
