
import json
import logging
from datetime import datetime, timezone
from feedrank.context import EVENT, POST, FeedItem, UserContext
from feedrank.observability.logging import log_ranking_result

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

def test_log_ranking_result_emits_json(caplog):
    items = [
        FeedItem(kind=POST, id="p1", timestamp=NOW, rank=1.0),
        FeedItem(kind=EVENT, id="e1", timestamp=NOW, rank=0.5),
    ]

    with caplog.at_level(logging.INFO, logger="feed_ranking"):
        log_ranking_result("rid-1", "score", UserContext(user_id="u1"), items)

    record = json.loads(caplog.records[-1].getMessage())
    assert record["event"] == "feed_ranked"
    assert record["ranking_id"] == "rid-1"
    assert record["mode"] == "score"
    assert record["user_id"] == "u1"
    assert record["items"] == [
        {"id": "p1", "kind": "post", "score": 1.0, "position": 1},
        {"id": "e1", "kind": "event", "score": 0.5, "position": 2},
    ]

def test_log_ranking_result_without_scores_or_context(caplog):
    items = [FeedItem(kind=POST, id="p1", timestamp=NOW)]

    with caplog.at_level(logging.INFO, logger="feed_ranking"):
        log_ranking_result("rid-2", "timestamp", None, items)

    record = json.loads(caplog.records[-1].getMessage())
    assert record["user_id"] is None
    assert record["items"][0]["score"] is None

def test_log_ranking_result_writes_non_finite_score_as_string(caplog):
    items = [FeedItem(kind=EVENT, id="far", timestamp=NOW, rank=float("inf"))]

    with caplog.at_level(logging.INFO, logger="feed_ranking"):
        log_ranking_result("rid-3", "score", UserContext(user_id="u1"), items)

    message = caplog.records[-1].getMessage()
    assert "Infinity" not in message
    assert json.loads(message)["items"][0]["score"] == "inf"
