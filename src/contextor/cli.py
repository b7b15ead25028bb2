from pathlib import Path
from typing import Optional
import argparse
import asyncio
import logging

import aiohttp

from .clipboard import PyperclipClipboard
from .config import Config
from .exceptions import ClipboardError
from .fetcher import RepositoryContentFetcher
from .monitor import ClipboardMonitor
from .settings import AutoCopySetting

logger = logging.getLogger(__name__)


def setup_logging(debug: bool, log_file: Optional[Path] = None):
    """Configure logging for the application."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logging.getLogger().addHandler(file_handler)


def build_monitor(config: Config) -> ClipboardMonitor:
    """Wire a monitor to the system clipboard from config."""
    fetcher = RepositoryContentFetcher(
        api_host=config.api_host,
        timeout=aiohttp.ClientTimeout(total=config.request_timeout, connect=config.connect_timeout),
    )
    return ClipboardMonitor(
        clipboard=PyperclipClipboard(),
        fetcher=fetcher,
        auto_copy=AutoCopySetting(config.auto_copy),
        poll_interval=config.poll_interval,
    )


async def run_monitor(monitor: ClipboardMonitor):
    """Run the monitor until the surrounding task is cancelled."""
    task = monitor.start()
    try:
        await task
    finally:
        await monitor.stop()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Watch the clipboard for GitHub links and fetch repository context"
    )
    parser.add_argument('--auto-copy', action='store_true', default=None,
                        help="Copy fetched context back to the clipboard")
    parser.add_argument('--interval', type=float, help="Clipboard poll interval in seconds")
    parser.add_argument('--host', help="Content API host (default: uithub.com)")
    parser.add_argument('--config', type=Path, help="Path to a JSON config file")
    parser.add_argument('--log-file', type=Path, help="Also write logs to this file")
    parser.add_argument('--debug', action='store_true', help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Command-line entry point."""
    args = parse_args(argv)

    config = Config(args.config)
    try:
        config.update({
            'auto_copy': args.auto_copy,
            'poll_interval': args.interval,
            'api_host': args.host,
            'log_file': args.log_file,
        })
    except ValueError as e:
        raise SystemExit(f"Invalid option: {e}")

    setup_logging(args.debug, config.log_file)

    try:
        monitor = build_monitor(config)
    except ClipboardError as e:
        logger.error(f"Clipboard is not available: {e}")
        return 1

    logger.info(f"Watching clipboard every {config.poll_interval}s (auto-copy {'on' if config.auto_copy else 'off'})")
    try:
        asyncio.run(run_monitor(monitor))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
