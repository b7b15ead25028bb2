import asyncio
import logging
from typing import Dict, Optional
from urllib.parse import quote

import aiohttp

from .exceptions import DecodeError, NetworkError, ServerError
from .models import GitHubReference, RepositoryContent

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = 'uithub.com'


class RepositoryContentFetcher:
    """Client for the uithub content API.

    Turns an owner/repo pair into the markdown dump served at
    ``https://<host>/<owner>/<repo>/tree/main/<path>``.
    """

    def __init__(self, api_host: str = DEFAULT_API_HOST,
                 timeout: Optional[aiohttp.ClientTimeout] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        self.api_host = api_host
        self.timeout = timeout or aiohttp.ClientTimeout(total=30, connect=10)
        self.session = session
        self.headers: Dict[str, str] = {'Accept': 'text/markdown'}

    def build_url(self, owner: str, repo: str, path: str = "") -> str:
        """Build the content API URL, percent-encoding each component."""
        return (
            f"https://{self.api_host}/{quote(owner, safe='')}/{quote(repo, safe='')}"
            f"/tree/main/{quote(path.lstrip('/'), safe='/')}"
        )

    async def fetch_contents(self, owner: str, repo: str, path: str = "") -> str:
        """Fetch the repository dump as text.

        Raises NetworkError on transport failure or timeout, ServerError on a
        non-2xx status and DecodeError when the body is not UTF-8.
        """
        url = self.build_url(owner, repo, path)
        logger.info(f"Fetching repository contents from {url}")

        if self.session is not None:
            body = await self._get(self.session, url)
        else:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                body = await self._get(session, url)

        try:
            text = body.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response from {url} is not valid UTF-8: {e}", url=url) from e

        logger.debug(f"Fetched {len(body)} bytes from {url}")
        return text

    async def fetch(self, reference: GitHubReference, path: str = "") -> RepositoryContent:
        """Fetch contents for a parsed reference."""
        text = await self.fetch_contents(reference.owner, reference.repo, path)
        return RepositoryContent(
            reference=reference,
            text=text,
            path=path,
            source_url=self.build_url(reference.owner, reference.repo, path),
        )

    async def _get(self, session: aiohttp.ClientSession, url: str) -> bytes:
        try:
            async with session.get(url, headers=self.headers, timeout=self.timeout) as response:
                if not 200 <= response.status < 300:
                    raise ServerError(response.status, url=url)
                return await response.read()
        except asyncio.TimeoutError as e:
            raise NetworkError(f"Timed out fetching {url}", url=url) from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Connection error fetching {url}: {e}", url=url) from e
