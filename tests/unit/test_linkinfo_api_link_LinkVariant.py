"""Unit tests for link variants and classification policies."""

import pytest

from linkinfo.api.link import (
    DEFAULT_POLICY,
    WIKI_POLICY,
    FileTypes,
    LinkInfo,
    LinkVariant,
    get_policy,
    set_file_types,
    wiki_link,
)

pytestmark = pytest.mark.link


class TestDefaultPolicy:
    def test_delegates_to_link(self):
        variant = LinkVariant(LinkInfo("https://example.com/a.png"))
        assert variant.policy is DEFAULT_POLICY
        assert variant.kind == "link"
        assert variant.is_external is True
        assert variant.is_uri is True
        assert variant.is_absolute is True
        assert variant.is_local is False
        assert variant.is_relative is False

    def test_target_file_is_link(self):
        link = LinkInfo("docs/a.md")
        assert LinkVariant(link).target_file() is link


class TestWikiPolicy:
    def test_always_relative_and_local(self):
        variant = wiki_link("http://example.com/Page")
        assert variant.kind == "wiki"
        assert variant.is_relative is True
        assert variant.is_local is True
        assert variant.is_external is False
        assert variant.is_uri is False
        assert variant.is_absolute is False

    def test_structural_views_from_link(self):
        variant = wiki_link("./Guides/Setup.md")
        assert variant.full_path == "Guides/Setup.md"
        assert variant.file_path == "Guides/Setup.md"
        assert variant.file_path_no_ext == "Guides/Setup"
        assert variant.path == "Guides/"
        assert variant.file_name == "Setup.md"
        assert variant.file_name_no_ext == "Setup"
        assert variant.ext == "md"
        assert variant.has_ext is True
        assert variant.is_empty is False
        assert str(variant) == "Guides/Setup.md"

    def test_target_file_adds_page_extension(self):
        assert wiki_link("Home").target_file() == LinkInfo("Home.md")
        assert wiki_link("v1.2 Notes").target_file() == LinkInfo("v1.2 Notes.md")

    def test_target_file_keeps_page_extension(self):
        assert wiki_link("Home.md").target_file() == LinkInfo("Home.md")
        assert wiki_link("").target_file() == LinkInfo("")

    def test_target_file_uses_registered_types(self):
        set_file_types(FileTypes(wiki_page=("wiki",)))
        assert wiki_link("Home.wiki").target_file() == LinkInfo("Home.wiki")
        assert wiki_link("Home.md").target_file() == LinkInfo("Home.md.md")


class TestDerivation:
    def test_append_keeps_policy(self):
        variant = wiki_link("a/b").append("..", "c")
        assert variant.policy is WIKI_POLICY
        assert variant.full_path == "a/c"

    def test_append_all_keeps_policy(self):
        variant = LinkVariant(LinkInfo("a")).append_all(["b"])
        assert variant.policy is DEFAULT_POLICY
        assert variant.full_path == "a/b"

    def test_with_ext_keeps_policy(self):
        variant = wiki_link("Home").with_ext("md")
        assert variant.policy is WIKI_POLICY
        assert variant.full_path == "Home.md"


def test_variants_sort_by_link():
    """Test variants order by their canonical path only."""
    variants = [wiki_link("b"), LinkVariant(LinkInfo("a"))]
    assert [str(v) for v in sorted(variants)] == ["a", "b"]


def test_get_policy():
    """Test policy lookup by kind."""
    assert get_policy() is DEFAULT_POLICY
    assert get_policy("wiki") is WIKI_POLICY
    assert repr(WIKI_POLICY) == "WikiLinkPolicy()"


def test_get_policy_unknown():
    """Test unknown kinds are rejected."""
    with pytest.raises(ValueError, match="Unknown link kind: image"):
        get_policy("image")
