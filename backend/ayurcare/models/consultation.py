# backend/ayurcare/models/consultation.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TriageLevel(str, Enum):
    NORMAL = "Normal"
    NEEDS_DOCTOR = "Needs Doctor Consultation"
    URGENT = "Urgent"


class ConsultationStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    REVIEWED = "reviewed"


class Mood(str, Enum):
    HAPPY = "happy"
    NEUTRAL = "neutral"
    ANXIOUS = "anxious"
    SAD = "sad"
    IRRITABLE = "irritable"
    OVERWHELMED = "overwhelmed"


class MentalCondition(BaseModel):
    stress_level: int = Field(..., ge=1, le=10)
    sleep_quality: int = Field(..., ge=1, le=10)
    mood: Mood = Mood.NEUTRAL

    model_config = {"frozen": True}


class HealthInfo(BaseModel):
    weight: str = ""
    lifestyle: str = ""
    dietary_habits: str = ""


class DiseasePrediction(BaseModel):
    name: str
    confidence: float = Field(..., ge=0, le=100)


class HerbRecommendation(BaseModel):
    name: str
    dosage: str
    benefits: str


class FoodGuidance(BaseModel):
    consume: List[str] = []
    avoid: List[str] = []


class RecommendationBundle(BaseModel):
    herbs: List[HerbRecommendation] = []
    foods: FoodGuidance = FoodGuidance()
    lifestyle: List[str] = []
    yoga_practices: List[str] = []


class ConsultationInput(BaseModel):
    user_id: str
    symptoms: List[str] = []
    mental_condition: MentalCondition
    health_info: HealthInfo = HealthInfo()
    disease_history: str = ""
    old_treatments: str = ""

    @field_validator("symptoms")
    @classmethod
    def _distinct_symptoms(cls, value: List[str]) -> List[str]:
        seen = []
        for name in value:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return seen


class Consultation(BaseModel):
    id: str
    user_id: str
    date: datetime
    symptoms: List[str]
    mental_condition: MentalCondition
    health_info: HealthInfo = HealthInfo()
    disease_history: str = ""
    old_treatments: str = ""
    predicted_disease: List[DiseasePrediction] = []
    recommendations: RecommendationBundle = RecommendationBundle()
    triage_level: TriageLevel = TriageLevel.NORMAL
    status: ConsultationStatus = ConsultationStatus.PENDING
    doctor_notes: Optional[str] = None


class ConsultationUpdate(BaseModel):
    """Partial patch; only the reviewer-owned fields are mutable."""
    status: Optional[ConsultationStatus] = None
    doctor_notes: Optional[str] = None


class ConsultationReview(BaseModel):
    doctor_notes: str


class ConsultationStats(BaseModel):
    total: int
    pending: int
    completed: int
    reviewed: int
    needs_review: int
