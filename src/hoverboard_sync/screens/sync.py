from dataclasses import replace

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, Static, Button, Checkbox, RichLog
from textual.containers import Horizontal, Vertical
from textual.binding import Binding

from hoverboard_sync.errors import SyncError


class SyncScreen(Screen):
    """Screen to trigger and monitor an upstream sync."""

    BINDINGS = [
        Binding("escape", "go_back", "Back", show=True),
    ]

    def compose(self) -> ComposeResult:
        cfg = self.app.config
        yield Header()
        with Vertical(id="sync-container"):
            yield Static("", id="sync-status")
            with Horizontal(id="sync-options"):
                yield Checkbox("Backups", cfg.backup_enabled, id="opt-backup")
                yield Checkbox("Re-download feed", cfg.force_refresh, id="opt-refresh")
                yield Checkbox("Update speaker data", cfg.update_speaker_data, id="opt-speakers")
            yield Button("Start Sync", id="sync-button", variant="primary")
            yield RichLog(id="sync-log", highlight=True, markup=True)
        yield Footer()

    def on_mount(self) -> None:
        self._update_status()

    def _update_status(self):
        cfg = self.app.config
        status = self.query_one("#sync-status", Static)
        status.update(
            f"[bold]Data directory:[/bold] {cfg.data_dir}\n"
            f"[bold]Upstream:[/bold] {cfg.sessionize_url}\n"
            f"[bold]Sessions loaded:[/bold] {self.app.data_loader.session_count()}"
        )

    def _options(self):
        return replace(
            self.app.config,
            backup_enabled=self.query_one("#opt-backup", Checkbox).value,
            force_refresh=self.query_one("#opt-refresh", Checkbox).value,
            update_speaker_data=self.query_one("#opt-speakers", Checkbox).value,
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "sync-button":
            event.button.disabled = True
            event.button.label = "Syncing..."
            config = self._options()
            self.query_one("#sync-log", RichLog).clear()
            self.run_worker(lambda: self._do_sync(config), thread=True, exclusive=True)

    def _do_sync(self, config):
        """Run the pipeline off the UI thread, streaming progress into the log."""
        from hoverboard_sync.sync import SyncRunner

        log = self.query_one("#sync-log", RichLog)

        def log_msg(msg: str):
            self.app.call_from_thread(log.write, msg)

        try:
            result = SyncRunner(config, log=log_msg).run()
            log_msg("")
            if result.changed:
                log_msg("[bold green]Sync complete, local files updated.[/bold green]")
            else:
                log_msg("[bold green]Sync complete, nothing changed.[/bold green]")
            self.app.call_from_thread(self.app.refresh_data)
        except SyncError as e:
            log_msg(f"[bold red]Sync aborted: {e}[/bold red]")
        except Exception as e:
            log_msg(f"[bold red]Error: {e!r}[/bold red]")
        finally:
            self.app.call_from_thread(self._reset_button)

    def _reset_button(self):
        button = self.query_one("#sync-button", Button)
        button.disabled = False
        button.label = "Start Sync"
        self._update_status()

    def action_go_back(self) -> None:
        self.app.pop_screen()
