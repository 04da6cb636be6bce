# backend/ayurcare/models/catalog.py

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class SymptomCreate(BaseModel):
    name: str
    category: str
    description: str = ""
    severity: Severity = Severity.MILD


class Symptom(SymptomCreate):
    id: str


class SymptomUpdate(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    severity: Optional[Severity] = None


class DiseaseCreate(BaseModel):
    name: str
    ayurvedic_name: str = ""
    description: str = ""
    dosha_involvement: List[str] = []
    common_symptoms: List[str] = []


class Disease(DiseaseCreate):
    id: str


class DiseaseUpdate(BaseModel):
    name: Optional[str] = None
    ayurvedic_name: Optional[str] = None
    description: Optional[str] = None
    dosha_involvement: Optional[List[str]] = None
    common_symptoms: Optional[List[str]] = None


class TreatmentCreate(BaseModel):
    name: str
    disease_id: str
    herbs: List[str] = []
    therapies: List[str] = []
    dietary_guidelines: str = ""
    duration: str = ""


class Treatment(TreatmentCreate):
    id: str


class TreatmentUpdate(BaseModel):
    name: Optional[str] = None
    disease_id: Optional[str] = None
    herbs: Optional[List[str]] = None
    therapies: Optional[List[str]] = None
    dietary_guidelines: Optional[str] = None
    duration: Optional[str] = None
