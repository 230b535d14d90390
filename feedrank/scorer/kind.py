
from datetime import datetime
from typing import Dict, Mapping, Optional

from feedrank.context import FeedItem, UserContext
from feedrank.scorer.base import ScoreFunction
from feedrank.scorer.decay import ExponentialDecayScorer

class KindScorer:
    """
    kindごとにScoreFunctionを切り替える。
    未登録のkindはdefaultで採点するため、新しいkindを追加してもコアの変更は不要。
    """
    def __init__(self, scorers: Mapping[str, ScoreFunction], default: Optional[ScoreFunction] = None):
        self.scorers: Dict[str, ScoreFunction] = dict(scorers)
        self.default = default or ExponentialDecayScorer()

    def score(self, item: FeedItem, context: Optional[UserContext], now: datetime) -> float:
        scorer = self.scorers.get(item.kind, self.default)
        return scorer.score(item, context, now)
