"""Registry of recognized file types.

The host fills the registry from configuration (LinkInfoConfig.apply). Until
then the defaults of ExtensionConfig are used.
"""

from .FileTypes import FileTypes

_FILE_TYPES: FileTypes | None = None


def set_file_types(file_types: FileTypes | None) -> None:
    """Register the extension sets used by is_markdown_ext and is_wiki_page_ext.

    Passing None restores the configuration defaults.
    """
    global _FILE_TYPES
    _FILE_TYPES = file_types


def get_file_types() -> FileTypes:
    """Return the registered file types."""
    file_types = _FILE_TYPES
    if file_types is None:
        from ..config.ExtensionConfig import ExtensionConfig

        file_types = ExtensionConfig().to_file_types()
    return file_types
