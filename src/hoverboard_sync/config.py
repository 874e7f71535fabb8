from dataclasses import dataclass, field
from pathlib import Path

SESSIONIZE_URL = "https://sessionize.com/api/v2/y2kbnktu/view/all"
DEFAULT_DATA_DIR = Path("backup")
REQUEST_TIMEOUT = 30

SCHEDULE_FILENAME = "schedule.json"
SESSIONS_FILENAME = "sessions.json"
SPEAKERS_FILENAME = "speakers.json"
SESSIONIZE_FILENAME = "sessionize.json"
SOCIAL_FILENAME = "social.txt"

BACKUP_PREFIX_FORMAT = "%Y%m%d_%H%M%S"


@dataclass(frozen=True)
class EventInfo:
    """Event details embedded in the generated social posts."""

    name: str = "DevFest Milano 2018"
    url: str = "https://devfest2018.gdgmilano.it"
    hashtag: str = "#DevFest18"


@dataclass(frozen=True)
class SyncConfig:
    """Runtime switches and locations for a sync run."""

    backup_enabled: bool = True
    force_refresh: bool = True
    update_speaker_data: bool = True
    data_dir: Path = DEFAULT_DATA_DIR
    backup_dir: Path | None = None
    sessionize_url: str = SESSIONIZE_URL
    request_timeout: float | None = REQUEST_TIMEOUT
    event: EventInfo = field(default_factory=EventInfo)

    @property
    def backup_path(self) -> Path:
        """Directory receiving dated backups; the data directory unless overridden."""
        return self.backup_dir if self.backup_dir is not None else self.data_dir

    @property
    def schedule_file(self) -> Path:
        return self.data_dir / SCHEDULE_FILENAME

    @property
    def sessions_file(self) -> Path:
        return self.data_dir / SESSIONS_FILENAME

    @property
    def speakers_file(self) -> Path:
        return self.data_dir / SPEAKERS_FILENAME

    @property
    def sessionize_file(self) -> Path:
        return self.data_dir / SESSIONIZE_FILENAME

    @property
    def social_file(self) -> Path:
        return self.data_dir / SOCIAL_FILENAME
