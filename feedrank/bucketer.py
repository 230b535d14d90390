
import zlib

from feedrank.config import RankingConfig

MODE_SCORE = "score"
MODE_TIMESTAMP = "timestamp"

class Bucketer:
    def determine_mode(self, user_id: str, config: RankingConfig) -> str:
        """
        user_id のCRC32をもとにサンプリング判定を行い、
        スコアリング対象であれば "score" を返す。
        そうでなければ "timestamp" を返す。

        ハッシュ値の正規化には 10000 の剰余を利用する (0.01%単位)。
        """
        if not config.scoring_enabled:
            return MODE_TIMESTAMP

        user_hash = zlib.crc32(user_id.encode("utf-8"))
        normalized_hash = (user_hash % 10000) / 10000.0

        if normalized_hash < config.sampling_rate:
            return MODE_SCORE

        # Target out, fallback to timestamp (Baseline)
        return MODE_TIMESTAMP
