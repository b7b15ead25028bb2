"""Clipboard watcher that turns GitHub repository links into LLM-ready context."""

from .exceptions import (
    ContextorError,
    ParseError,
    FetchError,
    NetworkError,
    DecodeError,
    ServerError,
    ClipboardError,
)
from .models import (
    ClipboardSnapshot,
    GitHubReference,
    RepositoryContent,
    MonitorState,
    MonitorStatus,
)
from .github import extract_reference, parse_reference
from .fetcher import RepositoryContentFetcher
from .clipboard import Clipboard, PyperclipClipboard
from .settings import AutoCopySetting
from .monitor import ClipboardMonitor

__version__ = "0.1.0"

__all__ = [
    'ContextorError',
    'ParseError',
    'FetchError',
    'NetworkError',
    'DecodeError',
    'ServerError',
    'ClipboardError',
    'ClipboardSnapshot',
    'GitHubReference',
    'RepositoryContent',
    'MonitorState',
    'MonitorStatus',
    'extract_reference',
    'parse_reference',
    'RepositoryContentFetcher',
    'Clipboard',
    'PyperclipClipboard',
    'AutoCopySetting',
    'ClipboardMonitor',
]
