from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, Footer, Static, Label
from textual.containers import VerticalScroll
from textual.binding import Binding


class SessionDetailScreen(Screen):
    """Detailed view of a single session record and its speakers."""

    BINDINGS = [
        Binding("escape", "go_back", "Back", show=True),
    ]

    def __init__(self, session_slug: str):
        super().__init__()
        self.session_slug = session_slug

    def compose(self) -> ComposeResult:
        yield Header()
        yield VerticalScroll(id="detail-container")
        yield Footer()

    def on_mount(self) -> None:
        self._populate()

    def _populate(self):
        """Fill the detail view with session data."""
        container = self.query_one("#detail-container", VerticalScroll)

        session = self.app.data_loader.get_session(self.session_slug)
        if not session:
            container.mount(Static(f"Session {self.session_slug} not found."))
            return

        container.mount(Static(f"[bold]{session.title}[/bold]"))

        meta_parts = [f"[bold]Slug:[/bold] {self.session_slug}"]
        if session.language:
            meta_parts.append(f"[bold]Language:[/bold] {session.language}")
        if session.complexity:
            meta_parts.append(f"[bold]Level:[/bold] {session.complexity}")
        if session.tags:
            meta_parts.append(f"[bold]Tags:[/bold] {', '.join(session.tags)}")
        if session.video_id:
            meta_parts.append(f"[bold]Video:[/bold] {session.video_id}")
        if session.presentation:
            meta_parts.append(f"[bold]Presentation:[/bold] {session.presentation}")
        container.mount(Static("\n".join(meta_parts)))

        if session.description:
            container.mount(Static(""))
            container.mount(Label("[bold]Description[/bold]"))
            container.mount(Static(session.description))

        for speaker_slug in session.speakers:
            speaker = self.app.data_loader.get_speaker(speaker_slug)
            container.mount(Static(""))
            if not speaker:
                container.mount(Static(f"[bold red]Unknown speaker: {speaker_slug}[/bold red]"))
                continue
            container.mount(Static(f"[bold]Speaker: {speaker.name}[/bold]"))

            speaker_meta = []
            if speaker.title:
                speaker_meta.append(speaker.title)
            if speaker.company:
                speaker_meta.append(f"[bold]Company:[/bold] {speaker.company}")
            if speaker.country:
                speaker_meta.append(f"[bold]Country:[/bold] {speaker.country}")
            for social in speaker.socials:
                speaker_meta.append(f"[bold]{social.name}:[/bold] {social.link}")
            if speaker_meta:
                container.mount(Static("\n".join(speaker_meta)))

            bio = speaker.short_bio or speaker.bio
            if bio:
                container.mount(Static(bio))

    def action_go_back(self) -> None:
        self.app.pop_screen()
