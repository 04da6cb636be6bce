import pytest

from ayurcare.models import TriageLevel
from ayurcare.services.triage import classify


@pytest.mark.parametrize(
    "symptoms, stress_level, expected",
    [
        (["Chest Pain"], 1, TriageLevel.URGENT),
        (["High Fever"], 3, TriageLevel.URGENT),
        ([], 9, TriageLevel.URGENT),
        (["Headache", "Fatigue", "Joint Pain", "Insomnia"], 1, TriageLevel.NEEDS_DOCTOR),
        (["Headache"], 7, TriageLevel.NEEDS_DOCTOR),
        (["Headache"], 2, TriageLevel.NORMAL),
        (["Headache", "Fatigue", "Joint Pain"], 6, TriageLevel.NORMAL),
    ],
)
def test_classify(symptoms, stress_level, expected):
    assert classify(symptoms, stress_level) == expected


def test_severe_symptom_wins_over_symptom_count():
    symptoms = ["Headache", "Fatigue", "Joint Pain", "Severe Headache"]
    assert classify(symptoms, 1) == TriageLevel.URGENT


def test_triage_level_values():
    assert TriageLevel.NEEDS_DOCTOR.value == "Needs Doctor Consultation"
