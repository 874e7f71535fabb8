from pathlib import Path

from textual.app import App
from textual.binding import Binding

from hoverboard_sync.config import SyncConfig
from hoverboard_sync.data_loader import DataLoader


CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"


class HoverboardSyncApp(App):
    """Inspect the Hoverboard schedule files and pull fresh data from Sessionize."""

    TITLE = "Hoverboard Sync"
    CSS_PATH = CSS_PATH

    BINDINGS = [
        Binding("1", "show_schedule", "Grid", show=True, priority=True),
        Binding("2", "show_sync", "Sync from Sessionize", show=True, priority=True),
        Binding("ctrl+r", "reload_files", "Reload files", show=True, priority=True),
        Binding("q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, config: SyncConfig | None = None):
        super().__init__()
        self.config = config or SyncConfig()
        self.data_loader: DataLoader = DataLoader(self.config)

    def on_mount(self) -> None:
        from hoverboard_sync.screens.schedule import ScheduleScreen
        self.install_screen(ScheduleScreen(), "schedule")
        self._announce()
        self.push_screen("schedule")

    def _announce(self):
        """Title the app after the schedule day and report what was loaded."""
        loader = self.data_loader
        self.sub_title = f"{loader.day_label} - {loader.source_name}"
        for problem in loader.problems:
            self.notify(f"{problem}; run 'hoverboard-sync sync' once it is in place", severity="warning")
        if loader.session_count():
            self.notify(loader.summary(), severity="information")

    def refresh_data(self) -> None:
        """Re-read the JSON files, e.g. after a sync rewrote them."""
        self.data_loader.reload()
        self._announce()

    def action_reload_files(self) -> None:
        self.refresh_data()

    def action_show_schedule(self) -> None:
        self.switch_screen("schedule")

    def action_show_sync(self) -> None:
        from hoverboard_sync.screens.sync import SyncScreen
        self.push_screen(SyncScreen())
