import logging
from dataclasses import replace

from hoverboard_sync.models import Social, Speaker, UpstreamSnapshot, UpstreamSpeaker
from hoverboard_sync.slug import make_slug

logger = logging.getLogger(__name__)

LINK_ICONS = {"Twitter": "twitter", "LinkedIn": "linkedin"}
DEFAULT_LINK_ICON = "website"


def social_links(speaker: UpstreamSpeaker) -> list[Social]:
    return [
        Social(name=link.title, icon=LINK_ICONS.get(link.title, DEFAULT_LINK_ICON), link=link.url)
        for link in speaker.links
    ]


def merge_speaker(old: Speaker, upstream: UpstreamSpeaker) -> Speaker:
    """Refresh name, photo, bio and socials; curated fields stay as they were."""
    return replace(
        old,
        name=upstream.full_name,
        photo=upstream.profile_picture,
        photo_url=upstream.profile_picture,
        bio=upstream.bio,
        socials=social_links(upstream),
    )


def new_speaker(upstream: UpstreamSpeaker) -> Speaker:
    return Speaker(
        name=upstream.full_name,
        title=upstream.tag_line,
        bio=upstream.bio,
        photo=upstream.profile_picture,
        photo_url=upstream.profile_picture,
        socials=social_links(upstream),
        order=5,
        featured=False,
    )


def merge_speakers(
    previous: dict[str, Speaker],
    snapshot: UpstreamSnapshot,
    update_speaker_data: bool = True,
) -> dict[str, Speaker]:
    """Rebuild the speaker directory from upstream.

    Existing speakers are refreshed via merge_speaker only when
    ``update_speaker_data`` is set; otherwise they are kept verbatim.
    """
    catalog: dict[str, Speaker] = {}
    for speaker in snapshot.speakers:
        slug = make_slug(speaker.full_name)
        old = previous.get(slug)
        if old is None:
            record = new_speaker(speaker)
        elif update_speaker_data:
            record = merge_speaker(old, speaker)
        else:
            record = old
        key = make_slug(record.name)
        if key in catalog:
            logger.warning("Speaker slug collision on %r, keeping %r", key, record.name)
        catalog[key] = record

    logger.info("Merged %d speakers (%d previously stored)", len(catalog), len(previous))
    return catalog
