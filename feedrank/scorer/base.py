
from datetime import datetime
from typing import Optional, Protocol, runtime_checkable
from feedrank.context import FeedItem, UserContext

@runtime_checkable
class ScoreFunction(Protocol):
    def score(self, item: FeedItem, context: Optional[UserContext], now: datetime) -> float:
        """
        1件のFeedItemの関連度スコアを返す（大きいほど上位）。
        nowはランキング1回につき1度だけ取得された時刻。
        """
        ...
