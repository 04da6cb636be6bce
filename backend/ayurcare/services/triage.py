"""
Triage rules.

Evaluated in strict precedence order:
  1. any severe symptom, or stress >= 9        -> Urgent
  2. four or more symptoms, or stress >= 7      -> Needs Doctor Consultation
  3. otherwise                                  -> Normal

Sleep quality and mood are collected but do not influence triage.
"""

from typing import Sequence

from ayurcare.models.consultation import TriageLevel

SEVERE_SYMPTOMS = frozenset({"Chest Pain", "Severe Headache", "High Fever"})

URGENT_STRESS_LEVEL = 9
DOCTOR_STRESS_LEVEL = 7
DOCTOR_SYMPTOM_COUNT = 4


def classify(symptoms: Sequence[str], stress_level: int) -> TriageLevel:
    if any(s in SEVERE_SYMPTOMS for s in symptoms) or stress_level >= URGENT_STRESS_LEVEL:
        return TriageLevel.URGENT
    if len(symptoms) >= DOCTOR_SYMPTOM_COUNT or stress_level >= DOCTOR_STRESS_LEVEL:
        return TriageLevel.NEEDS_DOCTOR
    return TriageLevel.NORMAL
