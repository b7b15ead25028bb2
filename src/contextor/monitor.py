import asyncio
import logging
from typing import Optional

from .clipboard import Clipboard
from .exceptions import ClipboardError, ContextorError, FetchError, ParseError
from .fetcher import RepositoryContentFetcher
from .github import GITHUB_MARKER, parse_reference
from .models import MonitorState, MonitorStatus, RepositoryContent
from .settings import AutoCopySetting

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.5


class ClipboardMonitor:
    """Polls the clipboard and turns new GitHub links into repository context.

    Each tick compares the clipboard change counter with the stored baseline
    and only reads the content when it moved. Strings that mention
    ``github.com`` and differ from the last processed one are parsed, fetched
    and, when auto-copy is on, written back to the clipboard. Ticks are
    serialized: the next sleep starts only after processing has finished.
    Clipboard calls run in a worker thread since backends such as xclip
    block while they run.
    """

    def __init__(self, clipboard: Clipboard,
                 fetcher: Optional[RepositoryContentFetcher] = None,
                 auto_copy: Optional[AutoCopySetting] = None,
                 poll_interval: float = DEFAULT_POLL_INTERVAL):
        self.clipboard = clipboard
        self.fetcher = fetcher or RepositoryContentFetcher()
        self.auto_copy = auto_copy if auto_copy is not None else AutoCopySetting()
        self.poll_interval = poll_interval

        self.last_error: Optional[Exception] = None
        self.last_content: Optional[RepositoryContent] = None

        self._state = MonitorState()
        self._status = MonitorStatus.IDLE
        self._stop_event = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def status(self) -> MonitorStatus:
        return self._status

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    def start(self) -> asyncio.Task:
        """Schedule the monitoring loop on the running event loop.

        Calling start() while a session is active returns the existing task.
        """
        if self._task is not None and not self._task.done():
            logger.debug("Clipboard monitoring already running")
            return self._task
        self._stop_event.clear()
        self._task = asyncio.create_task(self.run())
        return self._task

    async def restart(self) -> asyncio.Task:
        await self.stop()
        return self.start()

    async def stop(self) -> None:
        """Request cancellation and wait for the loop to exit.

        An in-flight fetch is allowed to finish but its result is discarded.
        """
        self._stop_event.set()
        task, self._task = self._task, None
        if task is not None and not task.done() and task is not asyncio.current_task():
            await task

    async def run(self) -> None:
        """Monitoring loop; returns once stop() has been requested.

        A stop() issued before the loop got to run is honored; start() is what
        clears a pending stop for a new session.
        """
        logger.info("Starting clipboard monitoring")
        self._state = MonitorState()
        try:
            await asyncio.to_thread(self.capture_baseline)
            self._state.is_running = True
            self._status = MonitorStatus.POLLING

            while not self._stop_event.is_set():
                await self.poll_once()
                if self._stop_event.is_set():
                    break
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=self.poll_interval)
                except asyncio.TimeoutError:
                    pass
        finally:
            self._state = MonitorState()
            self._status = MonitorStatus.STOPPED
            self._stop_event.clear()
            logger.info("Clipboard monitoring stopped")

    def capture_baseline(self) -> None:
        """Store the current change counter so existing content is not processed."""
        try:
            self._state.last_change_count = self.clipboard.change_counter()
        except ClipboardError as e:
            logger.warning(f"Could not read clipboard baseline: {e}")
            self._state.last_change_count = None

    async def poll_once(self) -> bool:
        """Run a single tick. Returns True when a link was processed."""
        try:
            change_count = await asyncio.to_thread(self.clipboard.change_counter)
            if change_count == self._state.last_change_count:
                return False
            self._state.last_change_count = change_count
            text = await asyncio.to_thread(self.clipboard.read_string)
        except ClipboardError as e:
            logger.warning(f"Clipboard unavailable: {e}")
            return False

        if not text:
            return False

        logger.debug(f"Found string in clipboard ({len(text)} characters)")

        if GITHUB_MARKER not in text:
            logger.debug("String is not a GitHub link, ignoring")
            return False

        if text == self._state.last_processed_string:
            logger.debug("GitHub link already processed, ignoring")
            return False

        logger.info(f"Detected new GitHub link: {text[:200]}")
        await self.process(text)
        return True

    async def process(self, text: str) -> Optional[RepositoryContent]:
        """Parse, fetch and optionally copy back the context for text.

        Errors never escape: they are logged and kept in ``last_error``.
        """
        self._state.last_processed_string = text
        self._status = MonitorStatus.PROCESSING
        try:
            return await self._process(text)
        except ParseError as e:
            logger.info(f"Failed to extract GitHub info from link: {e}")
        except FetchError as e:
            self.last_error = e
            logger.error(f"Error fetching context: {e}")
        except ContextorError as e:
            self.last_error = e
            logger.error(f"Error copying context to clipboard: {e}")
        except Exception as e:
            self.last_error = e
            logger.exception(f"Unexpected error processing clipboard text: {e}")
        finally:
            self._status = MonitorStatus.POLLING if self._state.is_running else MonitorStatus.IDLE
        return None

    async def _process(self, text: str) -> Optional[RepositoryContent]:
        reference = parse_reference(text)
        logger.info(f"Processing GitHub repository {reference}")

        content = await self.fetcher.fetch(reference)

        if self._stop_event.is_set() and self._state.is_running:
            logger.info(f"Monitoring stopped while fetching {reference}, discarding result")
            return None

        self.last_content = content
        self.last_error = None

        if self.auto_copy.enabled:
            await self._write_back(content.text)
        else:
            logger.debug("Auto-copy disabled, skipping clipboard operation")
        return content

    async def _write_back(self, text: str) -> None:
        logger.info(f"Auto-copy enabled, copying context to clipboard ({len(text)} characters)")
        await asyncio.to_thread(self.clipboard.write_string, text)
        # The write moved the counter; adopt it so our own output is not reprocessed
        self._state.last_change_count = await asyncio.to_thread(self.clipboard.change_counter)
