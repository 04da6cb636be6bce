"""Static symptom -> (disease, base confidence) lookup used by the scoring engine."""

from typing import Dict, List, Tuple

Candidate = Tuple[str, float]

FALLBACK_CANDIDATE: Candidate = ("General Dosha imbalance", 55)

PREDICTION_TABLE: Dict[str, List[Candidate]] = {
    "Headache": [("Vata Imbalance", 75), ("Pitta aggravation", 60)],
    "Fatigue": [("Kapha imbalance", 70), ("Ama accumulation", 65)],
    "Joint Pain": [("Vata-Kapha disorder", 80), ("Amavata", 72)],
    "Digestive Issues": [("Agni dysfunction", 78), ("Pitta imbalance", 68)],
    "Insomnia": [("Vata disorder", 82), ("Stress-related condition", 75)],
    "Anxiety": [("Vata-Pitta imbalance", 85), ("Manas Roga", 70)],
}


def candidates_for(symptom: str, table: Dict[str, List[Candidate]] = PREDICTION_TABLE) -> List[Candidate]:
    return table.get(symptom) or [FALLBACK_CANDIDATE]
