import re
import time
from typing import Iterable, Optional

# Wire key of the transient version metadata on a content aggregate.
VERSION_META_KEY = "__versionMeta"

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def now_millis() -> int:
    return int(time.time() * 1000)


def version_meta(content) -> Optional[dict]:
    if not isinstance(content, dict):
        return None
    meta = content.get(VERSION_META_KEY)
    return meta if isinstance(meta, dict) else None


def version_of(content, default: str = "1") -> str:
    """Version string a content snapshot is tagged with."""
    meta = version_meta(content)
    if meta and meta.get("version") not in (None, ""):
        return str(meta["version"])
    return default


def parse_version(value) -> int:
    """
    Integer part of a version string ("2" -> 2, "2.1" -> 2).
    Missing or unparsable values count as version 1.
    """
    match = _LEADING_INT.match(str(value)) if value not in (None, "") else None
    return int(match.group(0)) if match else 1


def max_version(history: Iterable[dict]) -> int:
    """Highest version in the ledger, 0 when it is empty."""
    return max((parse_version(version_of(entry)) for entry in history), default=0)


def next_version(history: Iterable[dict], floor: int = 0) -> str:
    """
    Next version number for a ledger.

    `floor` is the highest version ever handed out; passing it keeps
    allocation monotonic after the newest entries have been deleted.
    """
    return str(max(max_version(history), floor) + 1)


def strip_version_meta(content: dict) -> dict:
    """Shallow copy of `content` without its transient version metadata."""
    return {k: v for k, v in content.items() if k != VERSION_META_KEY}


def stamp(
    content: dict,
    *,
    version: str,
    name: str = "",
    note: str = "",
    timestamp: Optional[int] = None,
) -> dict:
    """New aggregate carrying a fresh version tag."""
    meta = {
        "version": version,
        "timestamp": now_millis() if timestamp is None else timestamp,
        "name": name or "",
        "note": note or "",
    }
    return {**content, VERSION_META_KEY: meta}
