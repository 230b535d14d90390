
from datetime import datetime
from typing import List, Optional, Protocol, Sequence
from feedrank.context import FeedItem, UserContext

class Ranker(Protocol):
    def rank_by_timestamp(self, items: Sequence[FeedItem]) -> List[FeedItem]:
        """
        timestampの降順（新しい順）に並べ替えたリストを返す
        """
        ...

    def rank_by_score(
        self,
        items: Sequence[FeedItem],
        context: Optional[UserContext] = None,
        now: Optional[datetime] = None,
    ) -> List[FeedItem]:
        """
        スコアを付与したコピーをスコアの降順に並べ替えたリストを返す
        """
        ...
