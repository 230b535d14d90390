
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from feedrank.context import FeedItem, UserContext, resolve_timestamp

class FunctionScorerAdapter:
    """
    dictを受け取りスコアを返す既存の関数（モデル推論エンドポイント等）をラップし、
    ScoreFunctionインターフェースに適合させるアダプター
    """
    def __init__(self, logic_func: Callable[[Dict[str, Any], Dict[str, Any]], Any]):
        self.logic_func = logic_func

    def score(self, item: FeedItem, context: Optional[UserContext], now: datetime) -> float:
        # FeedItem -> Dict変換
        item_dict = {
            'kind': item.kind,
            'id': item.id,
            'timestamp': resolve_timestamp(item).isoformat(),
            **item.meta
        }

        ctx_dict: Dict[str, Any] = {'now': now.isoformat()}
        if context is not None:
            ctx_dict.update({
                'user_id': context.user_id,
                **context.signals
            })

        return float(self.logic_func(item_dict, ctx_dict))
