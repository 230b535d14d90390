
import pytest
from datetime import datetime, timezone
from typing import Dict, Any
from feedrank.context import EVENT, FeedItem, UserContext
from feedrank.errors import ScoringFailure
from feedrank.ranker.adapter import FunctionScorerAdapter
from feedrank.ranker.feed_ranker import FeedRanker
from feedrank.scorer.base import ScoreFunction

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

# Mock existing model endpoint
def mock_model_func(item: Dict[str, Any], context: Dict[str, Any]) -> float:
    # The model receives plain dicts and returns a score
    if context.get('user_id') == 'fan' and item.get('coveId') == 'c1':
        return 10
    return 0.5

def test_adapter_converts_item_and_context():
    received = {}

    def capture(item, context):
        received['item'] = item
        received['context'] = context
        return "0.75"

    adapter = FunctionScorerAdapter(logic_func=capture)
    item = FeedItem(kind=EVENT, id="e1", timestamp=NOW, meta={'coveId': 'c1'})
    ctx = UserContext(user_id="user1", signals={'friends': ['u2']})

    score = adapter.score(item, ctx, NOW)

    assert score == 0.75
    assert received['item'] == {
        'kind': 'event',
        'id': 'e1',
        'timestamp': '2025-06-01T12:00:00+00:00',
        'coveId': 'c1',
    }
    assert received['context'] == {
        'now': '2025-06-01T12:00:00+00:00',
        'user_id': 'user1',
        'friends': ['u2'],
    }

def test_adapter_without_context():
    adapter = FunctionScorerAdapter(logic_func=mock_model_func)
    item = FeedItem(kind=EVENT, id="e1", timestamp=NOW)
    assert adapter.score(item, None, NOW) == 0.5

def test_adapter_is_a_score_function():
    assert isinstance(FunctionScorerAdapter(mock_model_func), ScoreFunction)

def test_adapter_as_drop_in_ranker_strategy():
    items = [
        FeedItem(kind=EVENT, id="other", timestamp=NOW, meta={'coveId': 'c2'}),
        FeedItem(kind=EVENT, id="favourite", timestamp=NOW, meta={'coveId': 'c1'}),
    ]
    ranker = FeedRanker(FunctionScorerAdapter(mock_model_func))
    ranked = ranker.rank_by_score(items, UserContext(user_id='fan'), now=NOW)

    assert [item.id for item in ranked] == ['favourite', 'other']
    assert ranked[0].rank == 10.0

def test_adapter_bad_result_fails_ranking():
    ranker = FeedRanker(FunctionScorerAdapter(lambda item, ctx: "n/a"))
    with pytest.raises(ScoringFailure):
        ranker.rank_by_score([FeedItem(kind=EVENT, id="e1", timestamp=NOW)], now=NOW)
