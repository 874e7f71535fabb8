import json
import logging
import shutil
from pathlib import Path
from typing import Any, Callable, TypeVar

from hoverboard_sync.errors import MalformedDataError, MissingFileError
from hoverboard_sync.models import Schedule, Session, Speaker, UpstreamSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")

BOOTSTRAP_HINT = "please run: download_schedule_info.sh"


def require_files(*paths: Path):
    """Fail before any network or write activity if a state file is missing."""
    for path in paths:
        if not path.exists():
            raise MissingFileError(f"Need {path}, {BOOTSTRAP_HINT}")


def parse_json(text: str | bytes, source: str) -> Any:
    """Decode and parse a JSON document; bad encoding or syntax is MalformedDataError."""
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        return json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedDataError(f"Invalid JSON in {source}: {e}") from e


def _build(builder: Callable[[Any], T], data: Any, source: str) -> T:
    """Run a model constructor, turning shape errors into MalformedDataError."""
    try:
        return builder(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise MalformedDataError(f"Unexpected document structure in {source}: {e!r}") from e


def read_json(path: Path) -> Any:
    return parse_json(path.read_bytes(), str(path))


def load_schedule(path: Path) -> Schedule:
    return _build(Schedule.from_dict, read_json(path), str(path))


def load_sessions(path: Path) -> dict[str, Session]:
    data = read_json(path)
    return _build(lambda d: {slug: Session.from_dict(s) for slug, s in d.items()}, data, str(path))


def load_speakers(path: Path) -> dict[str, Speaker]:
    data = read_json(path)
    return _build(lambda d: {slug: Speaker.from_dict(s) for slug, s in d.items()}, data, str(path))


def parse_snapshot(text: str | bytes, source: str = "upstream feed") -> UpstreamSnapshot:
    return _build(UpstreamSnapshot.from_dict, parse_json(text, source), source)


def load_snapshot(path: Path) -> UpstreamSnapshot:
    return _build(UpstreamSnapshot.from_dict, read_json(path), str(path))


def dump_catalog(records: dict) -> dict:
    return {slug: record.to_dict() for slug, record in records.items()}


def write_text(path: Path, text: str):
    """Replace a file's contents via atomic temp-file swap."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        f.write(text)
    tmp_path.replace(path)


def write_json(path: Path, data: Any):
    write_text(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")


def backup_file(path: Path, backup_dir: Path, prefix: str) -> Path:
    """Copy ``path`` to ``<backup_dir>/<prefix>_<name>`` and return the copy's path."""
    backup_dir.mkdir(parents=True, exist_ok=True)
    target = backup_dir / f"{prefix}_{path.name}"
    shutil.copy2(path, target)
    logger.info("Backed up %s to %s", path, target)
    return target
