"""Decode GitHub repository links found in clipboard text."""
import logging
import re
from typing import Iterator, Optional
from urllib.parse import unquote, urlparse

from .exceptions import ParseError
from .models import GitHubReference

logger = logging.getLogger(__name__)

GITHUB_HOST = 'github.com'
GITHUB_MARKER = 'github.com'

# Stops at whitespace, quotes and brackets so links inside markdown or prose are found
_URL_PATTERN = re.compile(r'https?://[^\s<>()\[\]"\']+', re.IGNORECASE)
_TRAILING_PUNCTUATION = ".,;:!?"


def _candidate_urls(text: str) -> Iterator[str]:
    for match in _URL_PATTERN.finditer(text):
        url = match.group(0).rstrip(_TRAILING_PUNCTUATION)
        if GITHUB_MARKER in url:
            yield url


def _decode_url(url: str) -> Optional[GitHubReference]:
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError:
        return None

    if parsed.scheme not in ('http', 'https') or host != GITHUB_HOST:
        return None

    parts = [part for part in parsed.path.split('/') if part]
    if len(parts) < 2:
        return None

    # Segments are stored decoded; the fetcher encodes them once when building its URL
    owner, repo = unquote(parts[0]), unquote(parts[1])
    if repo.endswith('.git'):
        repo = repo[:-len('.git')]
    if not repo:
        return None
    return GitHubReference(owner=owner, repo=repo)


def extract_reference(text: str) -> Optional[GitHubReference]:
    """Extract owner and repo from the first GitHub repository URL in text.

    Only ``http``/``https`` URLs whose host is exactly ``github.com`` and whose
    path has at least two segments are accepted. Anything after the second
    segment (``/tree/main``, ``/issues/1``) is ignored and a trailing ``.git``
    is dropped from the repo name. Returns None instead of raising.
    """
    if not text:
        return None
    for candidate in _candidate_urls(text):
        reference = _decode_url(candidate)
        if reference is not None:
            return reference
    return None


def parse_reference(text: str) -> GitHubReference:
    """Like extract_reference but raises ParseError on failure."""
    reference = extract_reference(text)
    if reference is None:
        raise ParseError(text)
    logger.debug(f"Extracted repo info - owner: {reference.owner}, repo: {reference.repo}")
    return reference
