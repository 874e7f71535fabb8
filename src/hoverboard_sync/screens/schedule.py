from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, DataTable, Input, Label, Static
from textual.containers import Horizontal, Vertical
from textual.binding import Binding
from rich.text import Text

from hoverboard_sync.models import Timeslot


class ScheduleScreen(Screen):
    """Timeslot x track grid of the local schedule."""

    BINDINGS = [
        Binding("slash", "focus_search", "Search", show=True),
        Binding("enter", "view_detail", "Details", show=True),
        Binding("r", "reload", "Reload", show=True),
        Binding("escape", "clear_search", "Clear", show=False),
    ]

    def __init__(self):
        super().__init__()
        self._timeslots: list[Timeslot] = []
        self._search_text: str = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="schedule-content"):
            with Horizontal(id="search-bar"):
                yield Label("Search:")
                yield Input(placeholder="Highlight by title or speaker...", id="search-input")
                yield Static("", id="schedule-date")
            yield DataTable(id="schedule-grid")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#schedule-grid", DataTable)
        table.cursor_type = "cell"
        self._load_data()

    def on_screen_resume(self) -> None:
        self._load_data()

    def _load_data(self):
        """Rebuild the grid from the data loader."""
        loader = self.app.data_loader
        day = loader.schedule.day1
        self._timeslots = sorted(day.timeslots, key=lambda t: t.start_time)

        self.query_one("#schedule-date", Static).update(day.date_readable or day.date)

        table = self.query_one("#schedule-grid", DataTable)
        table.clear(columns=True)
        table.add_column("Time", key="time")
        for idx, track in enumerate(loader.tracks):
            table.add_column(track, key=f"track-{idx}")
        self._populate()

    def _cell_text(self, slug: str | None, extend) -> Text:
        if not slug:
            return Text("")
        session = self.app.data_loader.get_session(slug)
        title = session.title if session else slug
        if extend:
            title = f"{title} [+{extend}]"
        if self._search_text and self._matches(slug):
            return Text(title, style="bold yellow")
        return Text(title)

    def _matches(self, slug: str) -> bool:
        query = self._search_text.lower()
        session = self.app.data_loader.get_session(slug)
        if not session:
            return query in slug
        if query in session.title.lower():
            return True
        for speaker_slug in session.speakers:
            speaker = self.app.data_loader.get_speaker(speaker_slug)
            if speaker and query in speaker.name.lower():
                return True
        return False

    def _slot_label(self, timeslot: Timeslot) -> Text:
        """Time range label, dimmed when the slot has no sessions at all."""
        label = f"{timeslot.start_time}-{timeslot.end_time}"
        if not any(key.items for key in timeslot.sessions):
            return Text(label, style="dim")
        return Text(label)

    def _populate(self):
        table = self.query_one("#schedule-grid", DataTable)
        table.clear()
        for idx, timeslot in enumerate(self._timeslots):
            cells = [
                self._cell_text(key.items[0] if key.items else None, key.extend)
                for key in timeslot.sessions
            ]
            table.add_row(
                self._slot_label(timeslot),
                *cells,
                key=f"slot-{idx}",
            )

    def _slug_at_cursor(self) -> str | None:
        table = self.query_one("#schedule-grid", DataTable)
        if table.row_count == 0:
            return None
        row, column = table.cursor_coordinate
        if column == 0 or row >= len(self._timeslots):
            return None
        sessions = self._timeslots[row].sessions
        if column - 1 >= len(sessions) or not sessions[column - 1].items:
            return None
        return sessions[column - 1].items[0]

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self._search_text = event.value
            self._populate()

    def on_data_table_cell_selected(self, event: DataTable.CellSelected) -> None:
        self.action_view_detail()

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_clear_search(self) -> None:
        inp = self.query_one("#search-input", Input)
        inp.value = ""
        self._search_text = ""
        self._populate()

    def action_reload(self) -> None:
        self.app.refresh_data()
        self._load_data()

    def action_view_detail(self) -> None:
        slug = self._slug_at_cursor()
        if not slug:
            return
        from hoverboard_sync.screens.session_detail import SessionDetailScreen
        self.app.push_screen(SessionDetailScreen(slug))
