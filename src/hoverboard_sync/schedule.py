import logging
from dataclasses import dataclass
from typing import Any

from hoverboard_sync.errors import MalformedDataError
from hoverboard_sync.models import Schedule, ScheduleDay, SessionKey, Timeslot, Track, UpstreamSnapshot
from hoverboard_sync.slug import make_slug
from hoverboard_sync.time_utils import normalize_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Placement:
    start_time: str
    end_time: str
    room_id: Any
    slug: str


def room_sort_key(placement: _Placement) -> tuple[bool, Any]:
    """Ascending room id; integer ids sort ahead of string ids."""
    room = placement.room_id
    if isinstance(room, bool) or not isinstance(room, (int, str)):
        raise MalformedDataError(f"Session {placement.slug!r} has no usable room id: {room!r}")
    return isinstance(room, str), room


def extend_annotations(schedule: Schedule) -> dict[str, Any]:
    """Map every scheduled session slug to the extend marker it carried."""
    return {
        key.items[0]: key.extend
        for timeslot in schedule.day1.timeslots
        for key in timeslot.sessions
        if key.items
    }


def build_schedule(previous: Schedule, snapshot: UpstreamSnapshot) -> Schedule:
    """Pivot the flat upstream session list into a timeslot x track grid.

    Sessions sharing a start time form one timeslot whose end is the earliest
    declared end among them. Every timeslot has one cell per upstream room, in
    room order; rooms without a session get an empty cell.
    """
    extended = extend_annotations(previous)

    placements = sorted(
        (
            _Placement(
                start_time=normalize_time(s.starts_at),
                end_time=normalize_time(s.ends_at),
                room_id=s.room_id,
                slug=make_slug(s.title),
            )
            for s in snapshot.sessions
        ),
        key=room_sort_key,
    )

    groups: dict[str, list[_Placement]] = {}
    for placement in placements:
        groups.setdefault(placement.start_time, []).append(placement)

    timeslots = []
    for start_time in sorted(groups):
        group = groups[start_time]
        cells = []
        for room in snapshot.rooms:
            placement = next((p for p in group if p.room_id == room.id), None)
            if placement is not None:
                cells.append(SessionKey([placement.slug], extended.get(placement.slug)))
            else:
                cells.append(SessionKey())
        timeslots.append(Timeslot(
            start_time=start_time,
            end_time=min(p.end_time for p in group),
            sessions=cells,
        ))

    logger.info("Built %d timeslots across %d tracks", len(timeslots), len(snapshot.rooms))
    return Schedule(ScheduleDay(
        date=previous.day1.date,
        date_readable=previous.day1.date_readable,
        tracks=[Track(room.name) for room in snapshot.rooms],
        timeslots=timeslots,
    ))
