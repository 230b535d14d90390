
import logging
from typing import Any, Callable, Dict, List

from feedrank.scorer.base import ScoreFunction
from feedrank.scorer.decay import ExponentialDecayScorer
from feedrank.scorer.engagement import EngagementWeightedScorer

logger = logging.getLogger(__name__)

DEFAULT_SCORER = "decay"
ENGAGEMENT_SCORER = "engagement"

ScorerFactory = Callable[..., ScoreFunction]

_factories: Dict[str, ScorerFactory] = {
    "decay": ExponentialDecayScorer,
    ENGAGEMENT_SCORER: EngagementWeightedScorer,
}

def register_scorer(name: str, factory: ScorerFactory) -> None:
    """
    Register a scoring strategy under ``name``. Registering an existing
    name replaces the previous factory.
    """
    if not name:
        raise ValueError("scorer name must be non-empty")
    _factories[name] = factory

def available_scorers() -> List[str]:
    return sorted(_factories)

def get_scorer(name: str, **kwargs: Any) -> ScoreFunction:
    """
    Factory function to get a ScoreFunction by name.

    Args:
        name (str): registered strategy name, e.g. "decay" or "engagement"
        **kwargs: forwarded to the strategy factory

    Returns:
        ScoreFunction: unknown names fall back to the default decay scorer.
    """
    factory = _factories.get(name)
    if factory is None:
        logger.warning("Unknown scorer %r, falling back to %r", name, DEFAULT_SCORER)
        factory = _factories[DEFAULT_SCORER]
    return factory(**kwargs)
