
import math
from dataclasses import replace
from datetime import datetime, timezone
from numbers import Real
from typing import Callable, List, Optional, Sequence

from feedrank.context import FeedItem, UserContext, resolve_timestamp
from feedrank.errors import InvalidItem, ScoringFailure
from feedrank.ranker.base import Ranker
from feedrank.scorer.base import ScoreFunction
from feedrank.scorer.decay import ExponentialDecayScorer

Clock = Callable[[], datetime]

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class FeedRanker(Ranker):
    """
    Orders feed items by timestamp or by an injected ScoreFunction.

    Both orderings are stable: items that compare equal keep their input
    order. Nothing else (ids, kinds) is ever used to break ties.
    """
    def __init__(self, score_function: Optional[ScoreFunction] = None, clock: Optional[Clock] = None):
        self.score_function = score_function or ExponentialDecayScorer()
        self.clock = clock or utc_now

    def rank_by_timestamp(self, items: Sequence[FeedItem]) -> List[FeedItem]:
        keyed = [(resolve_timestamp(item), item) for item in items]
        # sorted() stays stable with reverse=True
        keyed = sorted(keyed, key=lambda pair: pair[0], reverse=True)
        return [item for _, item in keyed]

    def rank_by_score(
        self,
        items: Sequence[FeedItem],
        context: Optional[UserContext] = None,
        now: Optional[datetime] = None,
    ) -> List[FeedItem]:
        if not items:
            return []

        # Sampled once so every item is scored against the same instant
        if now is None:
            now = self.clock()
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        scored = [replace(item, rank=self._score(item, context, now)) for item in items]
        return sorted(scored, key=lambda item: item.rank, reverse=True)

    def _score(self, item: FeedItem, context: Optional[UserContext], now: datetime) -> float:
        resolve_timestamp(item)

        try:
            value = self.score_function.score(item, context, now)
        except InvalidItem:
            raise
        except Exception as e:
            raise ScoringFailure(item.id, f"{type(e).__name__}: {e}") from e

        if isinstance(value, bool) or not isinstance(value, Real):
            raise ScoringFailure(item.id, f"score is not a number: {value!r}")
        value = float(value)
        if math.isnan(value):
            raise ScoringFailure(item.id, "score is NaN")
        return value


_default_ranker = FeedRanker()

def rank_by_timestamp(items: Sequence[FeedItem]) -> List[FeedItem]:
    return _default_ranker.rank_by_timestamp(items)

def rank_by_score(
    items: Sequence[FeedItem],
    context: Optional[UserContext] = None,
    now: Optional[datetime] = None,
    score_function: Optional[ScoreFunction] = None,
) -> List[FeedItem]:
    """
    Main entry point for feed ranking. Each returned item is a copy of the
    input item with ``rank`` set to its score.
    """
    ranker = FeedRanker(score_function) if score_function is not None else _default_ranker
    return ranker.rank_by_score(items, context, now)
