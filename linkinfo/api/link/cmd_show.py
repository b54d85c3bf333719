"""Link show API command.

CLI: linkinfo show <path> [--kind link|wiki]
"""

import logging
from collections.abc import Iterator

from .._output_schemas.link import LinkClassification, LinkShowOutput
from ..StageResult import StageResult
from ._link_views import _link_views
from ._load_file_types import _load_file_types
from .get_policy import get_policy
from .LinkInfo import LinkInfo
from .LinkVariant import LinkVariant

logger = logging.getLogger(__name__)


def cmd_show(path: str, kind: str = "link") -> StageResult:
    """Show the canonical form, views and classification of a link.

    Args:
        path: Raw link path as written in a document.
        kind: Classification policy, 'link' or 'wiki'.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        warnings = _load_file_types()

        yield (0.5, f"Classifying {kind} {path!r}...")
        try:
            policy = get_policy(kind)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = LinkShowOutput(
                errors=[str(e)],
                warnings=warnings,
                raw=path,
                link=None,
                classification=None,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        variant = LinkVariant(LinkInfo(path), policy)
        link = variant.link
        logger.debug("Canonicalized %r to %r", path, link.full_path)

        classification = LinkClassification(
            kind=variant.kind,
            is_relative=variant.is_relative,
            is_local=variant.is_local,
            is_external=variant.is_external,
            is_uri=variant.is_uri,
            is_absolute=variant.is_absolute,
            is_image_ext=link.is_image_ext,
            is_markdown_ext=link.is_markdown_ext,
            is_wiki_page_ext=link.is_wiki_page_ext,
            target_file=variant.target_file().full_path,
        )

        yield (1.0, "Complete")
        result_obj.result = f"Link {link.full_path!r}"
        result_obj.output = LinkShowOutput(
            errors=[],
            warnings=warnings,
            raw=path,
            link=_link_views(link),
            classification=classification,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing link {path!r}...",
        progress_callback=do_work,
    )
