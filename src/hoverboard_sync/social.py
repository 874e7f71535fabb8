from hoverboard_sync.config import EventInfo
from hoverboard_sync.errors import LookupFailure
from hoverboard_sync.models import Session, Speaker

ENGLISH = "English"

ENGLISH_TEMPLATE = (
    "{event} - FREE Conference (20+ speaker)\n"
    "Talk: {title} (by {speaker})\n"
    "Join now {url}\n"
    "{hashtags}"
)

ITALIAN_TEMPLATE = (
    "{event} - Conferenza gratuita (20+ speaker)\n"
    "Talk: {title} (by {speaker})\n"
    "Iscrivi ora su {url}\n"
    "{hashtags}"
)


def hashtag_line(tags: list[str], event_hashtag: str) -> str:
    """'Cloud Native', 'Go' -> '#CloudNative #Go #DevFest18'."""
    return " ".join([f"#{tag.replace(' ', '')}" for tag in tags] + [event_hashtag])


def first_speaker_name(slug: str, session: Session, speakers: dict[str, Speaker]) -> str:
    if not session.speakers:
        raise LookupFailure(f"Session {slug!r} has no speakers")
    speaker = speakers.get(session.speakers[0])
    if speaker is None:
        raise LookupFailure(f"Session {slug!r} references unknown speaker {session.speakers[0]!r}")
    return speaker.name


def social_post(slug: str, session: Session, speakers: dict[str, Speaker], event: EventInfo) -> str:
    template = ENGLISH_TEMPLATE if session.language == ENGLISH else ITALIAN_TEMPLATE
    return template.format(
        event=event.name,
        title=session.title,
        speaker=first_speaker_name(slug, session, speakers),
        url=event.url,
        hashtags=hashtag_line(session.tags, event.hashtag),
    )


def build_digest(sessions: dict[str, Session], speakers: dict[str, Speaker], event: EventInfo | None = None) -> str:
    """One promotional post per session, separated by blank lines."""
    event = event or EventInfo()
    return "\n\n".join(social_post(slug, s, speakers, event) for slug, s in sessions.items())
