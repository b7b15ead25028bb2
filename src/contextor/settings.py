import logging

logger = logging.getLogger(__name__)


class AutoCopySetting:
    """Toggle deciding whether fetched context replaces the clipboard.

    Owned by whatever front end runs the monitor; the monitor only reads
    ``enabled`` at the moment a fetch has succeeded.
    """

    def __init__(self, enabled: bool = False):
        self._enabled = bool(enabled)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        value = bool(value)
        if value != self._enabled:
            logger.info(f"Auto-copy {'enabled' if value else 'disabled'}")
        self._enabled = value

    def toggle(self) -> bool:
        self.enabled = not self._enabled
        return self._enabled

    def __bool__(self) -> bool:
        return self._enabled

    def __repr__(self) -> str:
        return f"AutoCopySetting(enabled={self._enabled})"
