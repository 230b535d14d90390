
import pytest
from datetime import datetime, timedelta, timezone
from feedrank.context import EVENT, POST, FeedItem, UserContext

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

def hours_ago(hours: float) -> datetime:
    return NOW - timedelta(hours=hours)

@pytest.fixture
def now():
    return NOW

@pytest.fixture
def user_context():
    return UserContext(user_id="test-user-123")

@pytest.fixture
def mixed_items():
    # [A@t-2h, B@t, C@t-1h]
    return [
        FeedItem(kind=EVENT, id="A", timestamp=hours_ago(2)),
        FeedItem(kind=POST, id="B", timestamp=NOW),
        FeedItem(kind=EVENT, id="C", timestamp=hours_ago(1)),
    ]
