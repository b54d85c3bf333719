"""StageResult dataclass shared by the linkinfo commands."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a cmd_* function hands back to the CLI.

    The CLI prints announce (e.g. "Showing link 'docs/a.md'..."), then drains
    progress_callback, which fills in result, output and success as it goes.
    output is the dict later checked against the command's registered schema
    (LinkShowOutput for link show, and so on).
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
