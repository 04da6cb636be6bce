"""Pydantic models for the consultation backend."""

from .catalog import (
    Disease,
    DiseaseCreate,
    DiseaseUpdate,
    Severity,
    Symptom,
    SymptomCreate,
    SymptomUpdate,
    Treatment,
    TreatmentCreate,
    TreatmentUpdate,
)
from .consultation import (
    Consultation,
    ConsultationInput,
    ConsultationReview,
    ConsultationStats,
    ConsultationStatus,
    ConsultationUpdate,
    DiseasePrediction,
    FoodGuidance,
    HealthInfo,
    HerbRecommendation,
    MentalCondition,
    Mood,
    RecommendationBundle,
    TriageLevel,
)
from .knowledge_base import Herb, KnowledgeBaseResults, Remedy

__all__ = [
    "Consultation",
    "ConsultationInput",
    "ConsultationReview",
    "ConsultationStats",
    "ConsultationStatus",
    "ConsultationUpdate",
    "Disease",
    "DiseaseCreate",
    "DiseasePrediction",
    "DiseaseUpdate",
    "FoodGuidance",
    "HealthInfo",
    "Herb",
    "HerbRecommendation",
    "KnowledgeBaseResults",
    "MentalCondition",
    "Mood",
    "RecommendationBundle",
    "Remedy",
    "Severity",
    "Symptom",
    "SymptomCreate",
    "SymptomUpdate",
    "Treatment",
    "TreatmentCreate",
    "TreatmentUpdate",
    "TriageLevel",
]
