import pytest

from hoverboard_sync.errors import LookupFailure
from hoverboard_sync.models import Session, UpstreamSnapshot
from hoverboard_sync.sessions import CategoryTable, merge_session, merge_sessions

from conftest import (
    FORMAT_TALK, LANG_ENGLISH, LANG_ITALIAN, LEVEL_ADVANCED, LEVEL_INTRO, TAG_ANDROID, TAG_CLOUD,
    make_feed, make_session, make_snapshot, make_speaker,
)


def test_new_session_gets_upstream_fields_and_curated_defaults(snapshot):
    catalog = merge_sessions({}, snapshot)

    assert list(catalog) == ["intro-to-x"]
    session = catalog["intro-to-x"]
    assert session.title == "Intro to X"
    assert session.description == "About Intro to X"
    assert session.complexity == "Beginner"
    assert session.language == "English"
    assert session.tags == []
    assert session.speakers == ["jane-doe"]
    assert (session.presentation, session.video_id, session.icon, session.image) == ("", "", "", "")
    assert session.extend is None


def test_existing_session_keeps_curated_fields():
    old = Session(
        title="Intro to X (draft)",
        description="old text",
        language="Italian",
        complexity="Advanced",
        tags=["Old"],
        speakers=["someone-else"],
        presentation="https://slides.example.com/x",
        video_id="abc123",
        icon="icon.svg",
        image="cover.png",
        extend=2,
    )

    catalog = merge_sessions({"intro-to-x": old}, make_snapshot())

    session = catalog["intro-to-x"]
    assert session.presentation == "https://slides.example.com/x"
    assert session.video_id == "abc123"
    assert session.icon == "icon.svg"
    assert session.image == "cover.png"
    assert session.extend == 2
    assert session.title == "Intro to X"
    assert session.description == "About Intro to X"
    assert session.language == "English"
    assert session.complexity == "Beginner"
    assert session.speakers == ["jane-doe"]


def test_merge_session_does_not_mutate_old_record():
    old = Session(title="A", video_id="v")
    upstream = Session(title="B", tags=["t"])

    merged = merge_session(old, upstream)

    assert old.title == "A"
    assert merged.title == "B"
    assert merged.video_id == "v"


def test_tags_collect_every_match():
    snapshot = make_snapshot(sessions=[
        make_session("s1", "Intro to X", "09:00", "09:30",
                     items=[TAG_ANDROID, FORMAT_TALK, LEVEL_ADVANCED, LANG_ITALIAN, TAG_CLOUD]),
    ])

    session = merge_sessions({}, snapshot)["intro-to-x"]

    assert session.tags == ["Android", "Cloud Native"]
    assert session.complexity == "Advanced"
    assert session.language == "Italian"


def test_first_matching_item_wins():
    snapshot = make_snapshot(sessions=[
        make_session("s1", "Intro to X", "09:00", "09:30",
                     items=[FORMAT_TALK, LEVEL_ADVANCED, LEVEL_INTRO, LANG_ENGLISH]),
    ])

    assert merge_sessions({}, snapshot)["intro-to-x"].complexity == "Advanced"


@pytest.mark.parametrize("items", [
    [LEVEL_INTRO, LANG_ENGLISH],
    [FORMAT_TALK, LANG_ENGLISH],
    [FORMAT_TALK, LEVEL_INTRO],
])
def test_missing_required_category_item_is_fatal(items):
    snapshot = make_snapshot(sessions=[make_session("s1", "Intro to X", "09:00", "09:30", items=items)])

    with pytest.raises(LookupFailure):
        merge_sessions({}, snapshot)


def test_unknown_level_label_is_fatal():
    feed = make_feed()
    feed["categories"][1]["items"].append({"id": 99, "name": "Expert"})
    feed["sessions"][0]["categoryItems"] = [FORMAT_TALK, 99, LANG_ENGLISH]

    with pytest.raises(LookupFailure, match="Expert"):
        merge_sessions({}, UpstreamSnapshot.from_dict(feed))


def test_unknown_speaker_id_is_fatal():
    snapshot = make_snapshot(sessions=[
        make_session("s1", "Intro to X", "09:00", "09:30", speakers=("ghost",)),
    ])

    with pytest.raises(LookupFailure, match="ghost"):
        merge_sessions({}, snapshot)


def test_missing_tags_category_means_no_tags():
    feed = make_feed()
    feed["categories"] = [c for c in feed["categories"] if c["title"] != "Tags"]

    session = merge_sessions({}, UpstreamSnapshot.from_dict(feed))["intro-to-x"]

    assert session.tags == []


def test_missing_level_category_is_fatal():
    feed = make_feed()
    feed["categories"] = [c for c in feed["categories"] if c["title"] != "Level"]

    with pytest.raises(LookupFailure):
        merge_sessions({}, UpstreamSnapshot.from_dict(feed))


def test_slug_collision_keeps_later_session():
    snapshot = make_snapshot(
        sessions=[
            make_session("s1", "Intro to X", "09:00", "09:30"),
            make_session("s2", "Intro to X!", "10:00", "10:30", speakers=("spk-2",)),
        ],
        speakers=[make_speaker("spk-1", "Jane Doe"), make_speaker("spk-2", "John Roe")],
    )

    catalog = merge_sessions({}, snapshot)

    assert list(catalog) == ["intro-to-x"]
    assert catalog["intro-to-x"].title == "Intro to X!"
    assert catalog["intro-to-x"].speakers == ["john-roe"]


def test_sessions_missing_upstream_are_dropped(snapshot):
    previous = {"gone": Session(title="Gone"), "intro-to-x": Session(title="Intro to X")}

    assert list(merge_sessions(previous, snapshot)) == ["intro-to-x"]


def test_merge_is_idempotent(snapshot):
    first = merge_sessions({}, snapshot)
    second = merge_sessions(first, snapshot)

    assert first == second


def test_category_table_lookups(snapshot):
    table = CategoryTable.from_snapshot(snapshot, "Tags", required=False)
    session = snapshot.sessions[0]

    assert table.all(session) == []
    with pytest.raises(LookupFailure):
        table.first(session)
    with pytest.raises(LookupFailure):
        CategoryTable.from_snapshot(snapshot, "Track")
    assert CategoryTable.from_snapshot(snapshot, "Track", required=False).items == {}
