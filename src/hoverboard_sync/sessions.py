import logging
from dataclasses import replace

from hoverboard_sync.errors import LookupFailure
from hoverboard_sync.models import Session, UpstreamSession, UpstreamSnapshot
from hoverboard_sync.slug import make_slug

logger = logging.getLogger(__name__)

SESSION_FORMAT = "Session format"
LEVEL = "Level"
LANGUAGE = "Language"
TAGS = "Tags"

COMPLEXITY = {
    "Introductory and overview": "Beginner",
    "Intermediate": "Intermediate",
    "Advanced": "Advanced",
}


class CategoryTable:
    """Item id -> name lookup for one upstream category."""

    def __init__(self, title: str, items: dict[int, str]):
        self.title = title
        self.items = items

    @classmethod
    def from_snapshot(cls, snapshot: UpstreamSnapshot, title: str, required: bool = True) -> "CategoryTable":
        """Build the table for ``title``; a missing optional category is empty."""
        category = next((c for c in snapshot.categories if c.title == title), None)
        if category is None:
            if required:
                raise LookupFailure(f"Upstream feed has no {title!r} category")
            return cls(title, {})
        return cls(title, {item.id: item.name for item in category.items})

    def first(self, session: UpstreamSession) -> str:
        """Name of the first assigned item in this category; none is an error."""
        for item_id in session.category_items:
            if item_id in self.items:
                return self.items[item_id]
        raise LookupFailure(f"Session {session.title!r} has no {self.title!r} item")

    def all(self, session: UpstreamSession) -> list[str]:
        """Names of every assigned item in this category, possibly none."""
        return [self.items[i] for i in session.category_items if i in self.items]


def speaker_slugs(snapshot: UpstreamSnapshot) -> dict[str, str]:
    return {speaker.id: make_slug(speaker.full_name) for speaker in snapshot.speakers}


def complexity_for(level: str) -> str:
    try:
        return COMPLEXITY[level]
    except KeyError:
        raise LookupFailure(f"Unknown level label {level!r}") from None


def merge_session(old: Session, upstream: Session) -> Session:
    """Overwrite the upstream-derived fields of ``old``, keeping curated ones."""
    return replace(
        old,
        title=upstream.title,
        description=upstream.description,
        language=upstream.language,
        complexity=upstream.complexity,
        tags=list(upstream.tags),
        speakers=list(upstream.speakers),
    )


def new_session(upstream: Session) -> Session:
    """A fresh record: upstream-derived fields set, curated fields at defaults."""
    return Session(
        title=upstream.title,
        description=upstream.description,
        language=upstream.language,
        complexity=upstream.complexity,
        tags=list(upstream.tags),
        speakers=list(upstream.speakers),
    )


def merge_sessions(previous: dict[str, Session], snapshot: UpstreamSnapshot) -> dict[str, Session]:
    """Rebuild the session catalog from upstream, preserving curated fields."""
    formats = CategoryTable.from_snapshot(snapshot, SESSION_FORMAT)
    levels = CategoryTable.from_snapshot(snapshot, LEVEL)
    languages = CategoryTable.from_snapshot(snapshot, LANGUAGE)
    tags = CategoryTable.from_snapshot(snapshot, TAGS, required=False)
    speakers_by_id = speaker_slugs(snapshot)

    catalog: dict[str, Session] = {}
    for session in snapshot.sessions:
        # format must resolve even though the record does not store it
        formats.first(session)
        speaker_refs = []
        for speaker_id in session.speakers:
            if speaker_id not in speakers_by_id:
                raise LookupFailure(f"Session {session.title!r} references unknown speaker {speaker_id!r}")
            speaker_refs.append(speakers_by_id[speaker_id])

        upstream = Session(
            title=session.title,
            description=session.description,
            language=languages.first(session),
            complexity=complexity_for(levels.first(session)),
            tags=tags.all(session),
            speakers=speaker_refs,
        )

        slug = make_slug(session.title)
        old = previous.get(slug)
        record = merge_session(old, upstream) if old is not None else new_session(upstream)
        if slug in catalog:
            logger.warning("Session slug collision on %r, keeping %r", slug, session.title)
        catalog[slug] = record

    logger.info("Merged %d sessions (%d previously stored)", len(catalog), len(previous))
    return catalog
