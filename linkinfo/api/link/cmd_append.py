"""Link append API command.

CLI: linkinfo append <path> <part>...
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkAppendOutput
from ..StageResult import StageResult
from ._link_views import _link_views
from .LinkInfo import LinkInfo


def cmd_append(path: str, parts: list[str]) -> StageResult:
    """Append segments to a link, resolving '.' and '..' textually.

    Args:
        path: Base link path.
        parts: Segments appended left to right.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        base = LinkInfo(path)

        yield (0.5, f"Appending {len(parts)} segments...")
        link = base.append_all(parts)

        yield (1.0, "Complete")
        result_obj.result = f"Appended to {link.full_path!r}"
        result_obj.output = LinkAppendOutput(
            errors=[],
            warnings=[],
            base=base.full_path,
            parts=list(parts),
            link=_link_views(link),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Appending to {path!r}...",
        progress_callback=do_work,
    )
