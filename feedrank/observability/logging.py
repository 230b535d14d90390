
import json
import logging
import math
from typing import List, Optional
from feedrank.context import FeedItem, UserContext


logger = logging.getLogger("feed_ranking")
logger.setLevel(logging.INFO)
# Handler設定はLambda環境等に依存するため、ここでは標準出力への出力のみを想定
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)

def _loggable_score(score: Optional[float]):
    # JSON has no Infinity, keep it readable as a string
    if score is not None and not math.isfinite(score):
        return str(score)
    return score

def log_ranking_result(ranking_id: str, mode: str, context: Optional[UserContext], items: List[FeedItem]):
    """
    ランキング結果を構造化ログ(JSON)として出力する。
    """

    log_data = {
        "event": "feed_ranked",
        "ranking_id": ranking_id,
        "mode": mode,
        "user_id": context.user_id if context else None,
        "items": [
            {
                "id": item.id,
                "kind": item.kind,
                "score": _loggable_score(item.rank),
                "position": i + 1
            }
            for i, item in enumerate(items)
        ]
    }

    logger.info(json.dumps(log_data, allow_nan=False))
