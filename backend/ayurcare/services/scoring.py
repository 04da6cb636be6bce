# backend/ayurcare/services/scoring.py

import logging
import random
from typing import Dict, Iterable, List, Optional

from ayurcare.models.consultation import DiseasePrediction
from ayurcare.services.prediction_table import PREDICTION_TABLE, Candidate, candidates_for

logger = logging.getLogger(__name__)

REPEAT_BONUS = 5
BONUS_CEILING = 95
MAX_PREDICTIONS = 3


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


class ScoringEngine:
    """
    Rule-based disease predictor.

    Each symptom contributes its table candidates. A disease seen for the first
    time starts at its base confidence plus a small random jitter; every later
    contribution from another symptom adds REPEAT_BONUS, up to BONUS_CEILING.
    The top MAX_PREDICTIONS diseases are returned, highest confidence first.

    Pass `max_jitter=0` (or a seeded `rng`) for reproducible scores.
    """

    def __init__(
        self,
        table: Optional[Dict[str, List[Candidate]]] = None,
        rng: Optional[random.Random] = None,
        max_jitter: float = 10.0,
    ):
        self.table = PREDICTION_TABLE if table is None else table
        self.rng = rng or random.Random()
        self.max_jitter = max_jitter

    def _jitter(self) -> float:
        if self.max_jitter <= 0:
            return 0.0
        return self.rng.random() * self.max_jitter

    def score(self, symptoms: Iterable[str]) -> List[DiseasePrediction]:
        scores: Dict[str, float] = {}

        for symptom in symptoms:
            for disease, base_confidence in candidates_for(symptom, self.table):
                if disease in scores:
                    # bonus never pulls a score down
                    if scores[disease] < BONUS_CEILING:
                        scores[disease] = min(BONUS_CEILING, scores[disease] + REPEAT_BONUS)
                else:
                    scores[disease] = _clamp(base_confidence + self._jitter())

        # sorted() is stable, so ties keep first-encounter order
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)[:MAX_PREDICTIONS]
        logger.debug(f"Scored {len(scores)} candidate diseases, returning {len(ranked)}")
        return [
            DiseasePrediction(name=name, confidence=round(confidence, 2))
            for name, confidence in ranked
        ]
