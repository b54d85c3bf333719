"""Unit tests for linkinfo.api.link.name_bounds module."""

import pytest

from linkinfo.api.link.name_bounds import name_bounds

pytestmark = pytest.mark.link


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("", (0, 0)),
        ("file", (0, 4)),
        ("file.txt", (0, 4)),
        ("dir/file.txt", (4, 8)),
        ("archive.tar.gz", (0, 11)),
        (".hidden", (0, 7)),
        ("a/.hidden", (2, 9)),
        ("a.b/c", (4, 5)),
        ("//", (1, 2)),
        ("a/", (1, 2)),
        ("/root", (1, 5)),
    ],
)
def test_name_bounds(path, expected):
    """Test name start and extension offsets."""
    assert name_bounds(path) == expected


def test_name_bounds_dot_in_directory_only():
    """Test a dot before the last separator is not an extension."""
    path = "v1.2/notes"
    name_start, name_end = name_bounds(path)
    assert path[name_start:] == "notes"
    assert name_end == len(path)


@pytest.mark.parametrize(("path", "name_start"), [("//", 1), ("a/", 1)])
def test_name_bounds_trailing_slash_is_file_name(path, name_start):
    """Test the final slash itself becomes the file name."""
    start, end = name_bounds(path)
    assert start == name_start
    assert path[start:end] == "/"
