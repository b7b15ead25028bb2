"""Test doubles for the clipboard and the content API."""
import asyncio
from contextlib import asynccontextmanager
from typing import List, Optional

from contextor.clipboard import Clipboard


class MemoryClipboard(Clipboard):
    """In-memory clipboard with a real change counter."""

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.counter = 0
        self.writes: List[str] = []

    def read_string(self) -> Optional[str]:
        return self.text

    def write_string(self, text: str) -> None:
        self.writes.append(text)
        self.copy(text)

    def change_counter(self) -> int:
        return self.counter

    def copy(self, text: Optional[str]) -> None:
        """Simulate any application writing to the clipboard."""
        self.text = text
        self.counter += 1


class AsyncMockResponse:
    """Mock specifically for aiohttp response."""
    def __init__(self, body: bytes, status: int = 200):
        self.body = body
        self.status = status
        self.headers = {"content-type": "text/markdown"}

    async def read(self):
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


class MockSession:
    """Stands in for aiohttp.ClientSession and records requests."""
    def __init__(self, response: Optional[AsyncMockResponse] = None, error: Optional[BaseException] = None):
        self.response = response
        self.error = error
        self.requests = []

    @asynccontextmanager
    async def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self.error is not None:
            raise self.error
        yield self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


async def wait_until(predicate, timeout: float = 1.0, interval: float = 0.005):
    """Poll predicate until it is true or fail after timeout."""
    async def _wait():
        while not predicate():
            await asyncio.sleep(interval)
    await asyncio.wait_for(_wait(), timeout)
