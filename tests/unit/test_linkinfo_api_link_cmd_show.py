"""Unit tests for linkinfo.api.link.cmd_show module."""

import json

import pytest

from linkinfo.api.link.cmd_show import cmd_show
from linkinfo.api.validate_output import validate_output

pytestmark = pytest.mark.link


def test_cmd_show_relative_markdown(linkinfo_home, run_cmd):
    """Test views and classification of a relative markdown link."""
    result = run_cmd(cmd_show, "./docs/./Guide.md")

    assert result.success is True
    assert result.output["errors"] == []
    assert result.output["warnings"] == []
    assert result.output["raw"] == "./docs/./Guide.md"
    link = result.output["link"]
    assert link["full_path"] == "docs/Guide.md"
    assert link["path"] == "docs/"
    assert link["file_name_no_ext"] == "Guide"
    assert link["ext"] == "md"
    assert (link["name_start"], link["name_end"]) == (5, 10)
    classification = result.output["classification"]
    assert classification["kind"] == "link"
    assert classification["is_relative"] is True
    assert classification["is_local"] is True
    assert classification["is_markdown_ext"] is True
    assert classification["is_image_ext"] is False
    assert classification["target_file"] == "docs/Guide.md"


def test_cmd_show_external_image(linkinfo_home, run_cmd):
    """Test classification of an external image URL."""
    result = run_cmd(cmd_show, "https://example.com/logo.png")

    classification = result.output["classification"]
    assert classification["is_external"] is True
    assert classification["is_uri"] is True
    assert classification["is_local"] is False
    assert classification["is_image_ext"] is True


def test_cmd_show_wiki(linkinfo_home, run_cmd):
    """Test the wiki policy resolves a page name to its file."""
    result = run_cmd(cmd_show, "Home", kind="wiki")

    assert result.success is True
    classification = result.output["classification"]
    assert classification["kind"] == "wiki"
    assert classification["target_file"] == "Home.md"
    assert classification["is_absolute"] is False


def test_cmd_show_unknown_kind(linkinfo_home, run_cmd):
    """Test an unknown kind is reported, not raised."""
    result = run_cmd(cmd_show, "Home", kind="image")

    assert result.success is False
    assert "Unknown link kind" in result.output["errors"][0]
    assert result.output["link"] is None
    assert result.output["classification"] is None


def test_cmd_show_uses_configured_extensions(linkinfo_home, run_cmd):
    """Test the markdown set comes from the config file."""
    (linkinfo_home / "config.json").write_text(json.dumps({"extensions": {"markdown_extensions": ["txt"]}}))

    result = run_cmd(cmd_show, "notes.txt")

    assert result.output["classification"]["is_markdown_ext"] is True


def test_cmd_show_invalid_config_warns(linkinfo_home, run_cmd):
    """Test a broken config falls back to defaults with a warning."""
    (linkinfo_home / "config.json").write_text("{broken")

    result = run_cmd(cmd_show, "a.md")

    assert result.success is True
    assert "Invalid JSON" in result.output["warnings"][0]
    assert result.output["classification"]["is_markdown_ext"] is True


def test_cmd_show_output_matches_schema(linkinfo_home, run_cmd):
    """Test the output validates against the registered schema."""
    result = run_cmd(cmd_show, "a/b.md")
    assert validate_output(cmd_show, result.output) == result.output


def test_validate_output_rejects_missing_fields():
    """Test output without the required fields names the link.show schema."""
    with pytest.raises(ValueError, match=r"Output validation failed for link\.show"):
        validate_output(cmd_show, {"raw": "a.md"})


def test_validate_output_ignores_non_commands():
    """Test functions outside the cmd_* naming pass through unvalidated."""
    output = {"anything": 1}
    assert validate_output(validate_output, output) is output
