from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ClipboardSnapshot:
    """Change counter and string content as last seen on the clipboard."""
    change_count: int
    text: Optional[str] = None


@dataclass(frozen=True)
class GitHubReference:
    """Owner and repository name decoded from a GitHub URL."""
    owner: str
    repo: str

    def __post_init__(self):
        if not self.owner or not self.repo:
            raise ValueError("owner and repo must be non-empty")

    @property
    def url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class RepositoryContent:
    """Text dump of a repository as returned by the content API."""
    reference: GitHubReference
    text: str
    path: str = ""
    source_url: str = ""
    fetch_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def byte_length(self) -> int:
        return len(self.text.encode('utf-8'))


@dataclass
class MonitorState:
    """Mutable state owned by a single ClipboardMonitor."""
    last_change_count: Optional[int] = None
    last_processed_string: str = ""
    is_running: bool = False


class MonitorStatus(Enum):
    IDLE = "idle"
    POLLING = "polling"
    PROCESSING = "processing"
    STOPPED = "stopped"
