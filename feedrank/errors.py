
from typing import Optional


class RankingError(Exception):
    """Base class for every error raised by the ranking engine."""


class InvalidItem(RankingError):
    """An item lacks a usable timestamp or identity. Callers must sanitize upstream."""

    def __init__(self, item_id: Optional[str], reason: str):
        self.item_id = item_id
        self.reason = reason
        super().__init__(f"invalid feed item {item_id!r}: {reason}")


class ScoringFailure(RankingError):
    """The score function failed for one item, so the whole ranking pass failed."""

    def __init__(self, item_id: Optional[str], reason: str):
        self.item_id = item_id
        self.reason = reason
        super().__init__(f"scoring failed for feed item {item_id!r}: {reason}")


class InvalidFeedQuery(RankingError):
    pass
