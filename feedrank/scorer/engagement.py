
import math
from datetime import datetime
from numbers import Real
from typing import Optional

from feedrank.context import FeedItem, UserContext
from feedrank.errors import InvalidItem
from feedrank.scorer.base import ScoreFunction
from feedrank.scorer.decay import ExponentialDecayScorer

class EngagementWeightedScorer:
    """
    Boosts a base score by the item's engagement count (likes, RSVPs, ...)
    found in ``item.meta[signal_key]``:

        score = base * (1 + weight * log1p(engagement))

    Items without the signal score exactly like the base scorer.
    """
    def __init__(
        self,
        base: Optional[ScoreFunction] = None,
        weight: float = 0.1,
        signal_key: str = "engagement",
    ):
        if weight < 0:
            raise ValueError(f"weight must be non-negative, got {weight}")
        self.base = base or ExponentialDecayScorer()
        self.weight = weight
        self.signal_key = signal_key

    def score(self, item: FeedItem, context: Optional[UserContext], now: datetime) -> float:
        base_score = self.base.score(item, context, now)

        engagement = item.meta.get(self.signal_key, 0)
        if isinstance(engagement, bool) or not isinstance(engagement, Real):
            raise InvalidItem(item.id, f"non-numeric {self.signal_key} signal {engagement!r}")

        return base_score * (1.0 + self.weight * math.log1p(max(float(engagement), 0.0)))
