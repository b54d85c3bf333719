"""FileTypes model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileTypes:
    """Recognized extension sets, without leading dots, in priority order."""

    markdown: tuple[str, ...] = ()
    wiki_page: tuple[str, ...] = ()
