"""Test fixtures and configuration."""

import pytest
from unittest.mock import AsyncMock

from contextor.fetcher import RepositoryContentFetcher
from contextor.models import GitHubReference, RepositoryContent
from contextor.monitor import ClipboardMonitor
from contextor.settings import AutoCopySetting

from .helpers import MemoryClipboard


@pytest.fixture
def clipboard():
    return MemoryClipboard("some text that was already there")


@pytest.fixture
def repo_content():
    return RepositoryContent(
        reference=GitHubReference(owner="octo", repo="hello"),
        text="# hello\n...",
        source_url="https://uithub.com/octo/hello/tree/main/",
    )


@pytest.fixture
def fetcher(repo_content):
    mock = AsyncMock(spec=RepositoryContentFetcher)
    mock.fetch.return_value = repo_content
    return mock


@pytest.fixture
def auto_copy():
    return AutoCopySetting(enabled=True)


@pytest.fixture
def monitor(clipboard, fetcher, auto_copy):
    """Monitor with its baseline taken from the initial clipboard."""
    monitor = ClipboardMonitor(clipboard, fetcher=fetcher, auto_copy=auto_copy, poll_interval=0.01)
    monitor.capture_baseline()
    return monitor
