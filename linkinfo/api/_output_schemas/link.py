"""Output schemas for link commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkViews(BaseModel):
    """Canonical path and derived views of one link."""

    full_path: str = Field(..., description="Canonical path")
    name_start: int = Field(..., description="Offset where the file name begins")
    name_end: int = Field(..., description="Offset of the extension dot, or length of the path")
    path: str = Field(..., description="Directory portion, empty if none")
    file_name: str = Field(..., description="File name with extension")
    file_name_no_ext: str = Field(..., description="File name without extension")
    ext: str = Field(..., description="Extension without leading dot, empty if none")
    has_ext: bool = Field(..., description="True if the link has an extension")


class LinkClassification(BaseModel):
    """Classification flags of one link under its policy."""

    kind: str = Field(..., description="Policy kind: link or wiki")
    is_relative: bool
    is_local: bool
    is_external: bool
    is_uri: bool
    is_absolute: bool
    is_image_ext: bool
    is_markdown_ext: bool
    is_wiki_page_ext: bool
    target_file: str = Field(..., description="File the link refers to under its policy")


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show command."""

    raw: str = Field(..., description="Path as given")
    link: LinkViews | None = Field(..., description="Views of the canonical link, null on error")
    classification: LinkClassification | None = Field(..., description="Classification, null on error")


class LinkAppendOutput(BaseOutputSchema):
    """Output schema for link append command."""

    base: str = Field(..., description="Canonical base path")
    parts: list[str] = Field(..., description="Segments appended in order")
    link: LinkViews = Field(..., description="Views of the resulting link")


class LinkWithExtOutput(BaseOutputSchema):
    """Output schema for link with-ext command."""

    base: str = Field(..., description="Canonical base path")
    ext: str = Field(..., description="Requested extension")
    changed: bool = Field(..., description="False when the link already had the extension or is empty")
    link: LinkViews = Field(..., description="Views of the resulting link")


register_output_schema("link", "show", LinkShowOutput)
register_output_schema("link", "append", LinkAppendOutput)
register_output_schema("link", "with_ext", LinkWithExtOutput)
