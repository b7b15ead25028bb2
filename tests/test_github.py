"""Tests for GitHub link extraction."""
import pytest

from contextor.exceptions import ParseError
from contextor.github import extract_reference, parse_reference
from contextor.models import GitHubReference


@pytest.mark.parametrize("text,owner,repo", [
    ("https://github.com/apple/swift", "apple", "swift"),
    ("http://github.com/apple/swift", "apple", "swift"),
    ("https://github.com/apple/swift.git", "apple", "swift"),
    ("https://github.com/apple/swift/tree/main/stdlib", "apple", "swift"),
    ("https://github.com/apple/swift/", "apple", "swift"),
    ("https://github.com//apple//swift", "apple", "swift"),
    ("https://github.com/rust-lang/rust?tab=readme-ov-file#rust", "rust-lang", "rust"),
    ("https://github.com/some_user/repo.with.dots", "some_user", "repo.with.dots"),
])
def test_extracts_owner_and_repo(text, owner, repo):
    assert extract_reference(text) == GitHubReference(owner=owner, repo=repo)


def test_link_inside_prose():
    reference = extract_reference("check this out https://github.com/apple/swift.git")
    assert reference.owner == "apple"
    assert reference.repo == "swift"


def test_link_wrapped_in_punctuation():
    assert extract_reference("see (https://github.com/octo/hello).") == GitHubReference("octo", "hello")
    assert extract_reference("<https://github.com/octo/hello>") == GitHubReference("octo", "hello")
    assert extract_reference("[swift](https://github.com/apple/swift)") == GitHubReference("apple", "swift")


def test_first_valid_link_wins():
    text = "https://github.com/apple and https://github.com/octo/hello and https://github.com/a/b"
    assert extract_reference(text) == GitHubReference("octo", "hello")


@pytest.mark.parametrize("text", [
    "",
    "just some words",
    "https://gitlab.com/apple/swift",
    "https://www.github.com/apple/swift",
    "https://gist.github.com/apple/abc123",
    "https://api.github.com/repos/apple",
    "https://github.com/apple",
    "https://github.com/",
    "https://github.com",
    "github.com/apple/swift",
    "ftp://github.com/apple/swift",
    "https://github.com/apple/.git",
    "http://[github.com/apple/swift",
    "https://notgithub.com/apple/swift",
])
def test_rejects_non_repository_urls(text):
    assert extract_reference(text) is None


def test_parse_reference_raises():
    with pytest.raises(ParseError) as exc_info:
        parse_reference("https://github.com/apple")
    assert exc_info.value.text == "https://github.com/apple"


def test_parse_reference_returns_reference():
    assert parse_reference("https://github.com/octo/hello") == GitHubReference("octo", "hello")


def test_escaped_segments_are_decoded():
    assert extract_reference("https://github.com/a%2Db/c%20d") == GitHubReference("a-b", "c d")
