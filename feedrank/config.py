
import time
import logging
import boto3
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

PARAM_STRATEGY = '/feed/ranking/strategy'
PARAM_SCORING_ENABLED = '/feed/ranking/scoring_enabled'
PARAM_SAMPLING_RATE = '/feed/ranking/sampling_rate'
PARAM_HALF_LIFE_HOURS = '/feed/ranking/half_life_hours'

@dataclass
class RankingConfig:
    strategy: str = "decay"
    scoring_enabled: bool = False
    sampling_rate: float = 0.0
    half_life_hours: float = 24.0

class ConfigManager:
    def __init__(self, ttl_seconds: float = 60.0):
        self.ttl_seconds = ttl_seconds
        self._cached_config: Optional[RankingConfig] = None
        self._last_fetched_at: float = 0.0
        self._ssm_client = boto3.client('ssm')

    def get_config(self) -> RankingConfig:
        current_time = time.time()

        if self._cached_config and (current_time - self._last_fetched_at < self.ttl_seconds):
            return self._cached_config

        try:
            config = self._fetch_from_ssm()
        except Exception:
            logger.warning("Failed to fetch ranking config from SSM, using defaults", exc_info=True)
            return self._get_default_config()

        self._cached_config = config
        self._last_fetched_at = current_time
        return config

    def _fetch_from_ssm(self) -> RankingConfig:
        names = [
            PARAM_STRATEGY,
            PARAM_SCORING_ENABLED,
            PARAM_SAMPLING_RATE,
            PARAM_HALF_LIFE_HOURS,
        ]

        response = self._ssm_client.get_parameters(Names=names)
        params = {p['Name']: p['Value'] for p in response.get('Parameters', [])}

        strategy = params.get(PARAM_STRATEGY, 'decay')

        # scoring_enabled assumes "true" (case-insensitive) is True
        scoring_enabled = params.get(PARAM_SCORING_ENABLED, 'false').strip().lower() == 'true'

        sampling_rate = float(params.get(PARAM_SAMPLING_RATE, '0.0'))
        half_life_hours = float(params.get(PARAM_HALF_LIFE_HOURS, '24.0'))

        if not 0.0 <= sampling_rate <= 1.0:
            raise ValueError(f"sampling_rate must be within [0, 1], got {sampling_rate}")
        if not half_life_hours > 0:
            raise ValueError(f"half_life_hours must be positive, got {half_life_hours}")

        return RankingConfig(
            strategy=strategy,
            scoring_enabled=scoring_enabled,
            sampling_rate=sampling_rate,
            half_life_hours=half_life_hours
        )

    def _get_default_config(self) -> RankingConfig:
        # 安全側に倒す(timestamp順, スコアリング無効)
        return RankingConfig()
