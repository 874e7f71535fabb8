import logging
from dataclasses import replace

import pytest

from hoverboard_sync.models import Badge, Social, Speaker
from hoverboard_sync.speakers import merge_speakers, social_links

from conftest import make_snapshot, make_speaker

CURATED = {
    "short_bio": "Loves X",
    "company": "Acme",
    "company_logo": "acme.png",
    "company_logo_url": "https://acme.example.com/logo.png",
    "country": "Italy",
    "order": 1,
    "featured": True,
    "badges": [Badge(name="gde", description="Google Developer Expert", link="https://gde.example.com")],
}


@pytest.fixture
def stored_speaker():
    return Speaker(
        name="Jane Doe",
        title="Old tagline",
        bio="old bio",
        photo="old.jpg",
        photo_url="old.jpg",
        socials=[],
        **CURATED,
    )


def test_new_speaker_defaults(snapshot):
    catalog = merge_speakers({}, snapshot)

    assert list(catalog) == ["jane-doe"]
    speaker = catalog["jane-doe"]
    assert speaker.name == "Jane Doe"
    assert speaker.title == "Jane Doe tagline"
    assert speaker.bio == "Jane Doe bio"
    assert speaker.photo == speaker.photo_url == "https://img.example.com/spk-1.jpg"
    assert speaker.order == 5
    assert speaker.featured is False
    assert speaker.badges == []
    assert (speaker.short_bio, speaker.company, speaker.company_logo, speaker.country) == ("", "", "", "")


def test_social_icons():
    upstream = make_snapshot(speakers=[make_speaker("spk-1", "Jane Doe", links=[
        {"title": "Twitter", "url": "https://twitter.com/jane"},
        {"title": "LinkedIn", "url": "https://linkedin.com/in/jane"},
        {"title": "Company Website", "url": "https://jane.dev"},
    ])]).speakers[0]

    assert social_links(upstream) == [
        Social("Twitter", "twitter", "https://twitter.com/jane"),
        Social("LinkedIn", "linkedin", "https://linkedin.com/in/jane"),
        Social("Company Website", "website", "https://jane.dev"),
    ]


def test_force_update_refreshes_upstream_fields_only(stored_speaker, snapshot):
    speaker = merge_speakers({"jane-doe": stored_speaker}, snapshot, update_speaker_data=True)["jane-doe"]

    assert speaker.bio == "Jane Doe bio"
    assert speaker.photo == "https://img.example.com/spk-1.jpg"
    assert speaker.photo_url == "https://img.example.com/spk-1.jpg"
    assert speaker.socials == [Social("Twitter", "twitter", "https://twitter.com/example")]
    assert speaker.title == "Old tagline"
    for name, value in CURATED.items():
        assert getattr(speaker, name) == value


def test_without_force_update_existing_speaker_is_untouched(stored_speaker, snapshot):
    original = replace(stored_speaker)

    catalog = merge_speakers({"jane-doe": stored_speaker}, snapshot, update_speaker_data=False)

    assert catalog["jane-doe"] == original


def test_speakers_missing_upstream_are_dropped(stored_speaker, snapshot):
    previous = {"jane-doe": stored_speaker, "old-timer": Speaker(name="Old Timer")}

    assert list(merge_speakers(previous, snapshot)) == ["jane-doe"]


def test_merge_is_idempotent(snapshot):
    first = merge_speakers({}, snapshot)

    assert merge_speakers(first, snapshot) == first
    assert merge_speakers(first, snapshot, update_speaker_data=False) == first


def test_slug_collision_keeps_later_speaker(caplog):
    snapshot = make_snapshot(speakers=[
        make_speaker("spk-1", "Jane Doe"),
        make_speaker("spk-2", "Jane  Doe!"),
    ])

    with caplog.at_level(logging.WARNING, logger="hoverboard_sync.speakers"):
        catalog = merge_speakers({}, snapshot)

    assert list(catalog) == ["jane-doe"]
    assert catalog["jane-doe"].name == "Jane  Doe!"
    assert catalog["jane-doe"].photo == "https://img.example.com/spk-2.jpg"
    assert "collision" in caplog.text
