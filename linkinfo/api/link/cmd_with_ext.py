"""Link with-ext API command.

CLI: linkinfo with-ext <path> <ext>
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkWithExtOutput
from ..StageResult import StageResult
from ._link_views import _link_views
from .LinkInfo import LinkInfo


def cmd_with_ext(path: str, ext: str) -> StageResult:
    """Replace the extension of a link.

    Args:
        path: Link path.
        ext: New extension, with or without its leading dot.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        base = LinkInfo(path)

        yield (0.5, f"Replacing extension with {ext!r}...")
        link = base.with_ext(ext)
        changed = link is not base

        yield (1.0, "Complete")
        result_obj.result = f"Link {link.full_path!r}" if changed else f"Link {base.full_path!r} unchanged"
        result_obj.output = LinkWithExtOutput(
            errors=[],
            warnings=[],
            base=base.full_path,
            ext=ext,
            changed=changed,
            link=_link_views(link),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Changing extension of {path!r}...",
        progress_callback=do_work,
    )
