import logging
from pathlib import Path

from hoverboard_sync.config import SyncConfig
from hoverboard_sync.errors import SyncError
from hoverboard_sync.models import Schedule, Session, Speaker
from hoverboard_sync import store

logger = logging.getLogger(__name__)


class DataLoader:
    """Read-only view over the local Hoverboard files for the TUI.

    Missing or corrupt files load as empty data so the app can still start
    and offer a sync.
    """

    def __init__(self, config: SyncConfig | None = None):
        self.config = config or SyncConfig()
        self.schedule = Schedule()
        self.sessions: dict[str, Session] = {}
        self.speakers: dict[str, Speaker] = {}
        self.problems: list[str] = []
        self.reload()

    def _load(self, loader, path: Path, default):
        if not path.exists():
            self.problems.append(f"{path.name} is missing")
            return default
        try:
            return loader(path)
        except (SyncError, OSError) as exc:
            logger.warning("Could not load %s: %s", path, exc)
            self.problems.append(f"{path.name} could not be read")
            return default

    def reload(self):
        cfg = self.config
        self.problems = []
        self.schedule = self._load(store.load_schedule, cfg.schedule_file, Schedule())
        self.sessions = self._load(store.load_sessions, cfg.sessions_file, {})
        self.speakers = self._load(store.load_speakers, cfg.speakers_file, {})

    @property
    def source_name(self) -> str:
        return str(self.config.data_dir)

    @property
    def day_label(self) -> str:
        day = self.schedule.day1
        return day.date_readable or day.date or "No date"

    def summary(self) -> str:
        """One-line description of what is loaded, e.g. for notifications."""
        return (
            f"{len(self.sessions)} sessions, {len(self.speakers)} speakers, "
            f"{len(self.tracks)} tracks, {len(self.schedule.day1.timeslots)} timeslots"
        )

    @property
    def tracks(self) -> list[str]:
        return [t.title for t in self.schedule.day1.tracks]

    def get_session(self, slug: str) -> Session | None:
        return self.sessions.get(slug)

    def get_speaker(self, slug: str) -> Speaker | None:
        return self.speakers.get(slug)

    def session_count(self) -> int:
        return len(self.sessions)
