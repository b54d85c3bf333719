"""Render a link's views for command output."""

from .._output_schemas.link import LinkViews
from .LinkInfo import LinkInfo


def _link_views(link: LinkInfo) -> LinkViews:
    return LinkViews(
        full_path=link.full_path,
        name_start=link.name_start,
        name_end=link.name_end,
        path=link.path,
        file_name=link.file_name,
        file_name_no_ext=link.file_name_no_ext,
        ext=link.ext,
        has_ext=link.has_ext,
    )
