
import math
from datetime import datetime
from typing import Optional

from feedrank.context import FeedItem, UserContext, resolve_timestamp

SECONDS_PER_HOUR = 3600.0

class ExponentialDecayScorer:
    """
    Exponential recency decay:

        score = exp(-hours_ago / half_life_hours)

    Items dated in the future get hours_ago < 0 and therefore score > 1.
    They are intentionally not clamped so upcoming events surface as they
    approach. Whether to cap them is an open product decision.
    """
    def __init__(self, half_life_hours: float = 24.0):
        if half_life_hours <= 0:
            raise ValueError(f"half_life_hours must be positive, got {half_life_hours}")
        self.half_life_hours = half_life_hours

    def score(self, item: FeedItem, context: Optional[UserContext], now: datetime) -> float:
        ts = resolve_timestamp(item)
        hours_ago = (now - ts).total_seconds() / SECONDS_PER_HOUR

        try:
            return math.exp(-hours_ago / self.half_life_hours)
        except OverflowError:
            # Far-future timestamp, unbounded by policy
            return math.inf
