from pathlib import Path
from typing import Any, Dict, Optional
import logging

import orjson

from .fetcher import DEFAULT_API_HOST
from .monitor import DEFAULT_POLL_INTERVAL

logger = logging.getLogger(__name__)


class Config:
    """Settings for the clipboard monitor, optionally loaded from a JSON file."""

    DEFAULT_CONFIG_PATH = Path.home() / ".config" / "contextor" / "config.json"

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path or self.DEFAULT_CONFIG_PATH)

        # Content API
        self.api_host = DEFAULT_API_HOST
        self.request_timeout = 30.0  # Seconds, whole request
        self.connect_timeout = 10.0  # Seconds

        # Monitoring
        self.poll_interval = DEFAULT_POLL_INTERVAL
        self.auto_copy = False

        # Logging
        self.log_file: Optional[Path] = None

        if self.config_path.exists():
            self.load_config()

    def load_config(self) -> None:
        """Load configuration from file, keeping defaults on failure."""
        try:
            with open(self.config_path, 'rb') as f:
                data = orjson.loads(f.read())
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            self.update(data)
        except Exception as e:
            logger.warning(f"Failed to load config from {self.config_path}: {e}")

    def update(self, values: Dict[str, Any]) -> None:
        """Apply known keys from values, ignoring None and unknown keys.

        Raises ValueError without changing anything if a value is invalid.
        """
        merged = self.to_dict()
        merged.update({k: v for k, v in values.items() if k in merged and v is not None})

        request_timeout = float(merged['request_timeout'])
        connect_timeout = float(merged['connect_timeout'])
        poll_interval = float(merged['poll_interval'])
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")
        if request_timeout <= 0 or connect_timeout <= 0:
            raise ValueError("timeouts must be positive")

        self.api_host = str(merged['api_host'])
        self.request_timeout = request_timeout
        self.connect_timeout = connect_timeout
        self.poll_interval = poll_interval
        self.auto_copy = bool(merged['auto_copy'])
        self.log_file = Path(merged['log_file']) if merged['log_file'] else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'api_host': self.api_host,
            'request_timeout': self.request_timeout,
            'connect_timeout': self.connect_timeout,
            'poll_interval': self.poll_interval,
            'auto_copy': self.auto_copy,
            'log_file': str(self.log_file) if self.log_file else None,
        }

    def save_config(self) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'wb') as f:
            f.write(orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2))
