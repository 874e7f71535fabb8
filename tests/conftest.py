import json

import pytest

from hoverboard_sync.config import SyncConfig
from hoverboard_sync.models import UpstreamSnapshot

FORMAT_TALK = 10
LEVEL_INTRO = 20
LEVEL_ADVANCED = 21
LANG_ENGLISH = 30
LANG_ITALIAN = 31
TAG_CLOUD = 40
TAG_ANDROID = 41


def make_feed(sessions=None, rooms=None, speakers=None):
    """Sessionize-shaped feed with the four categories the merger expects."""
    return {
        "sessions": sessions if sessions is not None else [
            make_session("s1", "Intro to X", "09:00", "09:30", room_id=1),
        ],
        "rooms": rooms if rooms is not None else [{"id": 1, "name": "Room A"}],
        "speakers": speakers if speakers is not None else [
            make_speaker("spk-1", "Jane Doe"),
        ],
        "categories": [
            {"id": 1, "title": "Session format", "items": [{"id": FORMAT_TALK, "name": "Talk"}]},
            {"id": 2, "title": "Level", "items": [
                {"id": LEVEL_INTRO, "name": "Introductory and overview"},
                {"id": LEVEL_ADVANCED, "name": "Advanced"},
            ]},
            {"id": 3, "title": "Language", "items": [
                {"id": LANG_ENGLISH, "name": "English"},
                {"id": LANG_ITALIAN, "name": "Italian"},
            ]},
            {"id": 4, "title": "Tags", "items": [
                {"id": TAG_CLOUD, "name": "Cloud Native"},
                {"id": TAG_ANDROID, "name": "Android"},
            ]},
        ],
    }


def make_session(session_id, title, start, end, room_id=1, speakers=("spk-1",), items=None, tz="+00"):
    return {
        "id": session_id,
        "title": title,
        "description": f"About {title}",
        "startsAt": f"2018-10-13T{start}:00{tz}",
        "endsAt": f"2018-10-13T{end}:00{tz}",
        "roomId": room_id,
        "speakers": list(speakers),
        "categoryItems": items if items is not None else [FORMAT_TALK, LEVEL_INTRO, LANG_ENGLISH],
    }


def make_speaker(speaker_id, name, links=None):
    return {
        "id": speaker_id,
        "fullName": name,
        "tagLine": f"{name} tagline",
        "bio": f"{name} bio",
        "profilePicture": f"https://img.example.com/{speaker_id}.jpg",
        "links": links if links is not None else [
            {"title": "Twitter", "url": "https://twitter.com/example", "linkType": "Twitter"},
        ],
    }


def make_snapshot(**kwargs) -> UpstreamSnapshot:
    return UpstreamSnapshot.from_dict(make_feed(**kwargs))


EMPTY_SCHEDULE = {
    "day1": {
        "date": "2018-10-13",
        "dateReadable": "October 13",
        "tracks": [],
        "timeslots": [],
    }
}


@pytest.fixture
def feed():
    return make_feed()


@pytest.fixture
def snapshot():
    return make_snapshot()


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding the three required files in their bootstrap state."""
    (tmp_path / "schedule.json").write_text(json.dumps(EMPTY_SCHEDULE))
    (tmp_path / "sessions.json").write_text("{}")
    (tmp_path / "speakers.json").write_text("{}")
    return tmp_path


@pytest.fixture
def config(data_dir):
    return SyncConfig(data_dir=data_dir, sessionize_url="https://sessionize.example.com/api")
