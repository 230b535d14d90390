
import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Tuple

from feedrank.bucketer import Bucketer, MODE_SCORE
from feedrank.config import ConfigManager, RankingConfig
from feedrank.context import EVENT, POST, FeedItem, UserContext
from feedrank.errors import InvalidFeedQuery
from feedrank.observability.logging import log_ranking_result
from feedrank.ranker.feed_ranker import FeedRanker
from feedrank.scorer.base import ScoreFunction
from feedrank.scorer.registry import DEFAULT_SCORER, ENGAGEMENT_SCORER, get_scorer

SUPPORTED_TYPES = (EVENT, POST)
DEFAULT_LIMIT = 10
MAX_LIMIT = 50

class ItemSource(Protocol):
    def fetch(self, types: Sequence[str], user_id: str) -> List[FeedItem]:
        ...

@dataclass
class FeedQuery:
    user_id: str
    limit: int = DEFAULT_LIMIT
    cursor: Optional[str] = None
    types: Sequence[str] = SUPPORTED_TYPES
    signals: dict = field(default_factory=dict)

@dataclass
class FeedPage:
    items: List[FeedItem]
    has_more: bool
    next_cursor: Optional[str]
    mode: str

def normalize_types(types: Sequence[str]) -> Tuple[str, ...]:
    requested = [t.strip().lower() for t in types]
    valid = tuple(t for t in requested if t in SUPPORTED_TYPES)
    if not valid:
        raise InvalidFeedQuery(
            f"Invalid types parameter. Must be one or more of: {', '.join(SUPPORTED_TYPES)}"
        )
    # Drop duplicates, keep request order
    return tuple(dict.fromkeys(valid))

def build_score_function(config: RankingConfig) -> ScoreFunction:
    decay = get_scorer(DEFAULT_SCORER, half_life_hours=config.half_life_hours)
    if config.strategy == DEFAULT_SCORER:
        return decay
    if config.strategy == ENGAGEMENT_SCORER:
        return get_scorer(ENGAGEMENT_SCORER, base=decay)
    return get_scorer(config.strategy)

def paginate(items: List[FeedItem], limit: int, cursor: Optional[str]) -> Tuple[List[FeedItem], bool]:
    """
    cursor（前ページ最後のアイテムid）の次から limit 件を切り出す。
    cursor が見つからない、または末尾の場合は空ページを返す。
    """
    remaining = items
    if cursor:
        index = next((i for i, item in enumerate(items) if item.id == cursor), -1)
        remaining = items[index + 1:] if index != -1 else []

    has_more = len(remaining) > limit
    return remaining[:limit], has_more

class FeedService:
    """
    Fetches a user's feed items from a source, ranks them in the mode chosen
    by the rollout config, and cuts the requested page.
    """
    def __init__(
        self,
        source: ItemSource,
        config_manager: Optional[ConfigManager] = None,
        bucketer: Optional[Bucketer] = None,
        ranker: Optional[FeedRanker] = None,
    ):
        self.source = source
        self.config_manager = config_manager
        self.bucketer = bucketer or Bucketer()
        self.ranker = ranker

    def get_feed(self, query: FeedQuery) -> FeedPage:
        if query.limit < 1:
            raise InvalidFeedQuery(f"limit must be positive, got {query.limit}")
        limit = min(query.limit, MAX_LIMIT)
        types = normalize_types(query.types)

        config = self.config_manager.get_config() if self.config_manager else RankingConfig()
        mode = self.bucketer.determine_mode(query.user_id, config)

        context = UserContext(user_id=query.user_id, signals=dict(query.signals))
        items = self.source.fetch(types, query.user_id)

        if mode == MODE_SCORE:
            ranker = self.ranker or FeedRanker(build_score_function(config))
            ranked = ranker.rank_by_score(items, context)
        else:
            ranker = self.ranker or FeedRanker()
            ranked = ranker.rank_by_timestamp(items)

        page, has_more = paginate(ranked, limit, query.cursor)
        log_ranking_result(str(uuid.uuid4()), mode, context, page)

        return FeedPage(
            items=page,
            has_more=has_more,
            next_cursor=page[-1].id if has_more else None,
            mode=mode,
        )
