"""Extension configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..link.FileTypes import FileTypes

DEFAULT_MARKDOWN_EXTENSIONS = ["md", "markdown", "mkd", "mdown", "mkdn", "mdwn"]


class ExtensionConfig(BaseModel):
    """Recognized markdown and wiki page extensions."""

    model_config = ConfigDict(extra="forbid")

    markdown_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS),
        description="Extensions treated as markdown, without the leading dot",
    )
    wiki_page_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS),
        description="Extensions treated as wiki pages, without the leading dot",
    )

    @field_validator("markdown_extensions", "wiki_page_extensions")
    @classmethod
    def _strip_dots(cls, value: list[str]) -> list[str]:
        cleaned = [ext.strip().removeprefix(".") for ext in value]
        if any(not ext for ext in cleaned):
            raise ValueError("extensions must not be empty")
        return cleaned

    def to_file_types(self) -> FileTypes:
        return FileTypes(
            markdown=tuple(self.markdown_extensions),
            wiki_page=tuple(self.wiki_page_extensions),
        )
