
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Union

from feedrank.errors import InvalidItem

# Known item kinds. Any other string is a valid kind as well.
EVENT = "event"
POST = "post"

Timestamp = Union[datetime, str]

@dataclass
class FeedItem:
    kind: str
    id: str
    timestamp: Optional[Timestamp]  # eventDate for events, createdAt for posts
    rank: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

@dataclass
class UserContext:
    user_id: str
    signals: Dict[str, Any] = field(default_factory=dict)


def resolve_timestamp(item: FeedItem) -> datetime:
    """
    FeedItemのtimestampをUTCのaware datetimeに変換する。
    naiveなdatetimeはUTCとみなす。取得できない場合はInvalidItemを送出する。
    """
    if not item.id:
        raise InvalidItem(item.id, "missing id")

    ts = item.timestamp
    if ts is None:
        raise InvalidItem(item.id, "missing timestamp")

    if isinstance(ts, str):
        try:
            # Python < 3.11 does not accept the "Z" suffix
            ts = datetime.fromisoformat(ts.strip().replace("Z", "+00:00"))
        except ValueError:
            raise InvalidItem(item.id, f"unparsable timestamp {item.timestamp!r}")
    elif not isinstance(ts, datetime):
        raise InvalidItem(item.id, f"unsupported timestamp type {type(ts).__name__}")

    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    try:
        return ts.astimezone(timezone.utc)
    except OverflowError:
        raise InvalidItem(item.id, f"timestamp out of range {item.timestamp!r}")
