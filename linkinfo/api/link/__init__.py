"""Link API domain: canonical link paths, classification and path algebra."""

from ._constants import (
    ABSOLUTE_PREFIXES,
    EXTERNAL_PREFIXES,
    IMAGE_EXTENSIONS,
    LOCAL_PREFIXES,
    RELATIVE_PREFIXES,
    URI_PREFIXES,
    WIKI_HOME_EXTENSION,
    WIKI_HOME_FILENAME,
    WIKI_PAGE_EXTENSION,
)
from .append_parts import append_parts
from .clean_full_path import clean_full_path
from .file_type_registry import get_file_types, set_file_types
from .FileTypes import FileTypes
from .get_policy import get_policy
from .is_absolute import is_absolute
from .is_ext_in import is_ext_in
from .is_external import is_external
from .is_image_ext import is_image_ext
from .is_local import is_local
from .is_markdown_ext import is_markdown_ext
from .is_relative import is_relative
from .is_uri import is_uri
from .is_wiki_page_ext import is_wiki_page_ext
from .LinkInfo import LinkInfo
from .LinkPolicy import DEFAULT_POLICY, LinkPolicy
from .LinkVariant import LinkVariant
from .name_bounds import name_bounds
from .remove_dot_directory import remove_dot_directory
from .starts_with_any import starts_with_any
from .wiki_link import wiki_link
from .WikiLinkPolicy import WIKI_POLICY, WikiLinkPolicy

__all__ = [
    "ABSOLUTE_PREFIXES",
    "DEFAULT_POLICY",
    "EXTERNAL_PREFIXES",
    "IMAGE_EXTENSIONS",
    "LOCAL_PREFIXES",
    "RELATIVE_PREFIXES",
    "URI_PREFIXES",
    "WIKI_HOME_EXTENSION",
    "WIKI_HOME_FILENAME",
    "WIKI_PAGE_EXTENSION",
    "WIKI_POLICY",
    "FileTypes",
    "LinkInfo",
    "LinkPolicy",
    "LinkVariant",
    "WikiLinkPolicy",
    "append_parts",
    "clean_full_path",
    "get_file_types",
    "get_policy",
    "is_absolute",
    "is_ext_in",
    "is_external",
    "is_image_ext",
    "is_local",
    "is_markdown_ext",
    "is_relative",
    "is_uri",
    "is_wiki_page_ext",
    "name_bounds",
    "remove_dot_directory",
    "set_file_types",
    "starts_with_any",
    "wiki_link",
]
