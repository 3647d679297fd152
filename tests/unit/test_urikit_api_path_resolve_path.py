"""Tests for resolve_path."""

import pytest

from urikit.api.path.resolve_path import resolve_path
from urikit.api.uri.URI import URI


@pytest.mark.parametrize(
    ("uri", "path", "expected"),
    [
        ("foo://a/foo/bar", "x", "foo://a/foo/bar/x"),
        ("foo://a/foo/bar/", "x", "foo://a/foo/bar/x"),
        ("foo://a/foo/bar/", "/x", "foo://a/x"),
        ("foo://a/foo/bar/", "x/", "foo://a/foo/bar/x"),
        ("foo://a", "x/", "foo://a/x"),
        ("foo://a", "/x/", "foo://a/x"),
        ("foo://a/b", "/x/..//y/.", "foo://a/y"),
        ("foo://a/b", "x/..//y/.", "foo://a/b/y"),
    ],
)
def test_resolve_path(uri, path, expected):
    assert resolve_path(URI.parse(uri), path).to_string() == expected


def test_resolve_path_multiple_fragments():
    uri = URI.parse("foo://a/b")
    assert resolve_path(uri, "c", "/d", "e").to_string() == "foo://a/d/e"
    assert resolve_path(uri, "c", "..", "..", "..").to_string() == "foo://a/"


def test_resolve_path_removes_trailing_slash():
    uri = URI.parse("foo://a/b/")
    assert resolve_path(uri).path == "/b"


def test_resolve_path_relative_base_stays_relative():
    assert resolve_path(URI.parse("foo:a/b"), "c").to_string() == "foo:a/b/c"
    assert resolve_path(URI.parse("foo:a/b"), "../c").to_string() == "foo:a/c"
    assert resolve_path(URI.parse("foo:"), "x").to_string() == "foo:x"


@pytest.mark.parametrize(("uri", "paths"), [("foo:a", [".."]), ("foo:a/b", ["../.."]), ("foo:a/b", ["..", "..", ".."])])
def test_resolve_path_relative_base_collapsing_to_root(uri, paths):
    assert resolve_path(URI.parse(uri), *paths).path == "/"


def test_resolve_path_relative_base_one_level_up():
    assert resolve_path(URI.parse("foo:a/b"), "..").path == "a"


@pytest.mark.parametrize(
    ("paths", "expected"),
    [
        (["/x"], "/x"),
        (["/x", "y"], "/x/y"),
        (["c", "/x/"], "/x"),
        (["/x", ".."], "/"),
    ],
)
def test_resolve_path_absolute_fragment_on_relative_base(paths, expected):
    resolved = resolve_path(URI.parse("foo:a/b"), *paths)
    assert resolved.path == expected
    assert resolved.to_string() == f"foo:{expected}"


def test_resolve_path_keeps_other_components():
    resolved = resolve_path(URI.parse("http://host/a?q=1#top"), "../b")
    assert resolved.to_string() == "http://host/b?q%3D1#top"


def test_resolve_path_never_uses_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_path(URI.parse("foo:"), "").path == "/"
    assert resolve_path(URI.parse("foo://a"), "x").path == "/x"
