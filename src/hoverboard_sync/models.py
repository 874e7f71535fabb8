from dataclasses import dataclass, field
from typing import Any

from hoverboard_sync.errors import MalformedDataError

DAY_KEY = "day1"


# Upstream (Sessionize) feed


@dataclass(frozen=True)
class CategoryItem:
    id: int
    name: str


@dataclass(frozen=True)
class Category:
    """An upstream taxonomy such as "Level" or "Tags"."""

    title: str
    items: tuple[CategoryItem, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(
            title=data["title"],
            items=tuple(CategoryItem(id=i["id"], name=i["name"]) for i in data.get("items") or []),
        )


@dataclass(frozen=True)
class Room:
    id: Any
    name: str


@dataclass(frozen=True)
class Link:
    title: str
    url: str


def parse_room_id(data: dict) -> int | str:
    """The session's room id; sessions without a room cannot be placed on the grid."""
    value = data.get("roomId")
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise MalformedDataError(f"Session {data.get('title')!r} has no usable roomId: {value!r}")
    return value


@dataclass(frozen=True)
class UpstreamSession:
    """A session as published by the upstream feed."""

    id: str
    title: str
    description: str = ""
    starts_at: str = ""
    ends_at: str = ""
    room_id: Any = None
    speakers: tuple[str, ...] = ()
    category_items: tuple[int, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "UpstreamSession":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description") or "",
            starts_at=data.get("startsAt") or "",
            ends_at=data.get("endsAt") or "",
            room_id=parse_room_id(data),
            speakers=tuple(data.get("speakers") or []),
            category_items=tuple(data.get("categoryItems") or []),
        )


@dataclass(frozen=True)
class UpstreamSpeaker:
    """A speaker as published by the upstream feed."""

    id: str
    full_name: str
    tag_line: str = ""
    bio: str = ""
    profile_picture: str = ""
    links: tuple[Link, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "UpstreamSpeaker":
        return cls(
            id=data["id"],
            full_name=data["fullName"],
            tag_line=data.get("tagLine") or "",
            bio=data.get("bio") or "",
            profile_picture=data.get("profilePicture") or "",
            links=tuple(
                Link(title=link["title"], url=link["url"])
                for link in data.get("links") or []
            ),
        )


@dataclass(frozen=True)
class UpstreamSnapshot:
    """The full upstream feed, parsed once and never mutated."""

    sessions: tuple[UpstreamSession, ...] = ()
    rooms: tuple[Room, ...] = ()
    speakers: tuple[UpstreamSpeaker, ...] = ()
    categories: tuple[Category, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "UpstreamSnapshot":
        return cls(
            sessions=tuple(UpstreamSession.from_dict(s) for s in data.get("sessions", [])),
            rooms=tuple(Room(id=r["id"], name=r["name"]) for r in data.get("rooms", [])),
            speakers=tuple(UpstreamSpeaker.from_dict(s) for s in data.get("speakers", [])),
            categories=tuple(Category.from_dict(c) for c in data.get("categories", [])),
        )


# Local (Hoverboard) documents


@dataclass
class SessionKey:
    """One schedule cell: zero or one session slug plus an extend marker."""

    items: list[str] = field(default_factory=list)
    extend: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "SessionKey":
        return cls(items=list(data.get("items") or []), extend=data.get("extend"))

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"items": list(self.items)}
        if self.extend is not None:
            data["extend"] = self.extend
        return data


@dataclass
class Timeslot:
    start_time: str
    end_time: str
    sessions: list[SessionKey] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Timeslot":
        return cls(
            start_time=data["startTime"],
            end_time=data["endTime"],
            sessions=[SessionKey.from_dict(s) for s in data.get("sessions", [])],
        )

    def to_dict(self) -> dict:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "sessions": [s.to_dict() for s in self.sessions],
        }


@dataclass
class Track:
    title: str


@dataclass
class ScheduleDay:
    date: str = ""
    date_readable: str = ""
    tracks: list[Track] = field(default_factory=list)
    timeslots: list[Timeslot] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduleDay":
        return cls(
            date=data.get("date", ""),
            date_readable=data.get("dateReadable", ""),
            tracks=[Track(title=t["title"]) for t in data.get("tracks", [])],
            timeslots=[Timeslot.from_dict(t) for t in data.get("timeslots", [])],
        )

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "dateReadable": self.date_readable,
            "tracks": [{"title": t.title} for t in self.tracks],
            "timeslots": [t.to_dict() for t in self.timeslots],
        }


@dataclass
class Schedule:
    """The single-day schedule grid consumed by the site."""

    day1: ScheduleDay = field(default_factory=ScheduleDay)

    @classmethod
    def from_dict(cls, data: dict) -> "Schedule":
        return cls(day1=ScheduleDay.from_dict(data[DAY_KEY]))

    def to_dict(self) -> dict:
        return {DAY_KEY: self.day1.to_dict()}


@dataclass
class Session:
    """A session record in the local catalog.

    ``title`` through ``speakers`` come from upstream on every sync; the
    remaining fields are curated by hand and survive re-syncs.
    """

    title: str
    description: str = ""
    language: str = ""
    complexity: str = ""
    tags: list[str] = field(default_factory=list)
    speakers: list[str] = field(default_factory=list)
    presentation: str = ""
    video_id: str = ""
    icon: str = ""
    image: str = ""
    extend: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(
            title=data["title"],
            description=data.get("description", ""),
            language=data.get("language", ""),
            complexity=data.get("complexity", ""),
            tags=list(data.get("tags") or []),
            speakers=list(data.get("speakers") or []),
            presentation=data.get("presentation", ""),
            video_id=data.get("videoId", ""),
            icon=data.get("icon", ""),
            image=data.get("image", ""),
            extend=data.get("extend"),
        )

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "language": self.language,
            "complexity": self.complexity,
            "tags": list(self.tags),
            "speakers": list(self.speakers),
            "presentation": self.presentation,
            "videoId": self.video_id,
            "icon": self.icon,
            "image": self.image,
        }
        if self.extend is not None:
            data["extend"] = self.extend
        return data


@dataclass
class Social:
    name: str
    icon: str
    link: str


@dataclass
class Badge:
    name: str = ""
    description: str = ""
    link: str = ""


@dataclass
class Speaker:
    """A speaker record in the local catalog."""

    name: str
    title: str = ""
    bio: str = ""
    photo: str = ""
    photo_url: str = ""
    socials: list[Social] = field(default_factory=list)
    short_bio: str = ""
    company: str = ""
    company_logo: str = ""
    company_logo_url: str = ""
    country: str = ""
    order: int = 5
    featured: bool = False
    badges: list[Badge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Speaker":
        return cls(
            name=data["name"],
            title=data.get("title", ""),
            bio=data.get("bio", ""),
            photo=data.get("photo", ""),
            photo_url=data.get("photoUrl", ""),
            socials=[
                Social(name=s.get("name", ""), icon=s.get("icon", ""), link=s.get("link", ""))
                for s in data.get("socials") or []
            ],
            short_bio=data.get("shortBio", ""),
            company=data.get("company", ""),
            company_logo=data.get("companyLogo", ""),
            company_logo_url=data.get("companyLogoUrl", ""),
            country=data.get("country", ""),
            order=data.get("order", 5),
            featured=data.get("featured", False),
            badges=[
                Badge(name=b.get("name", ""), description=b.get("description", ""), link=b.get("link", ""))
                for b in data.get("badges") or []
            ],
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "bio": self.bio,
            "photo": self.photo,
            "photoUrl": self.photo_url,
            "socials": [{"name": s.name, "icon": s.icon, "link": s.link} for s in self.socials],
            "shortBio": self.short_bio,
            "company": self.company,
            "companyLogo": self.company_logo,
            "companyLogoUrl": self.company_logo_url,
            "country": self.country,
            "order": self.order,
            "featured": self.featured,
            "badges": [{"name": b.name, "description": b.description, "link": b.link} for b in self.badges],
        }
