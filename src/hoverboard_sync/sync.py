import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from hoverboard_sync.config import BACKUP_PREFIX_FORMAT, SyncConfig
from hoverboard_sync.fetch import fetch_upstream
from hoverboard_sync.schedule import build_schedule
from hoverboard_sync.sessions import merge_sessions
from hoverboard_sync.social import build_digest
from hoverboard_sync.speakers import merge_speakers
from hoverboard_sync import store

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """What a run changed on disk."""

    schedule_changed: bool = False
    sessions_changed: bool = False
    speakers_changed: bool = False
    session_count: int = 0
    speaker_count: int = 0
    backups: list[Path] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.schedule_changed or self.sessions_changed or self.speakers_changed


class SyncRunner:
    """Fetch the upstream feed and reconcile it into the local Hoverboard files."""

    def __init__(
        self,
        config: SyncConfig | None = None,
        log: Callable[[str], None] | None = None,
        fetch: Callable[[str, float | None], str] | None = None,
    ):
        self.config = config or SyncConfig()
        self.log = log or print
        self.fetch = fetch or fetch_upstream

    def run(self, now: datetime | None = None) -> SyncResult:
        """Execute one full sync. Any SyncError aborts before derived files are written."""
        cfg = self.config
        prefix = (now or datetime.now()).strftime(BACKUP_PREFIX_FORMAT)

        store.require_files(cfg.schedule_file, cfg.sessions_file, cfg.speakers_file)

        if cfg.force_refresh or not cfg.sessionize_file.exists():
            self.log(f"Downloading upstream feed from {cfg.sessionize_url}...")
            store.write_text(cfg.sessionize_file, self.fetch(cfg.sessionize_url, cfg.request_timeout))
        else:
            self.log(f"Using cached upstream feed {cfg.sessionize_file}")

        schedule_old = store.load_schedule(cfg.schedule_file)
        sessions_old = store.load_sessions(cfg.sessions_file)
        speakers_old = store.load_speakers(cfg.speakers_file)
        snapshot = store.load_snapshot(cfg.sessionize_file)
        self.log(
            f"Upstream: {len(snapshot.sessions)} sessions, {len(snapshot.speakers)} speakers, "
            f"{len(snapshot.rooms)} rooms"
        )

        schedule_new = build_schedule(schedule_old, snapshot)
        sessions_new = merge_sessions(sessions_old, snapshot)
        speakers_new = merge_speakers(speakers_old, snapshot, cfg.update_speaker_data)
        digest = build_digest(sessions_new, speakers_new, cfg.event)

        result = SyncResult(session_count=len(sessions_new), speaker_count=len(speakers_new))
        result.schedule_changed = self._persist(
            cfg.schedule_file, schedule_old, schedule_new, schedule_new.to_dict, prefix, result
        )
        result.sessions_changed = self._persist(
            cfg.sessions_file, sessions_old, sessions_new, lambda: store.dump_catalog(sessions_new), prefix, result
        )
        result.speakers_changed = self._persist(
            cfg.speakers_file, speakers_old, speakers_new, lambda: store.dump_catalog(speakers_new), prefix, result
        )

        store.write_text(cfg.social_file, digest)
        self.log(f"Social digest written to {cfg.social_file}")
        self.log(f"Sync complete. {result.session_count} sessions, {result.speaker_count} speakers.")
        return result

    def _persist(
        self,
        path: Path,
        old: Any,
        new: Any,
        serialize: Callable[[], Any],
        prefix: str,
        result: SyncResult,
    ) -> bool:
        """Back up and rewrite ``path`` if ``new`` differs from ``old``."""
        if new == old:
            self.log(f"{path.name}: unchanged")
            return False
        if self.config.backup_enabled:
            result.backups.append(store.backup_file(path, self.config.backup_path, prefix))
        store.write_json(path, serialize())
        logger.info("Rewrote %s", path)
        self.log(f"{path.name}: updated")
        return True
