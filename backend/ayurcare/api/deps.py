"""
Dependency providers for API endpoints.

Repositories and services are built once in `create_app()` and kept on
`app.state`; these helpers hand them to the routes.
"""

from fastapi import Request

from ayurcare.repositories.diseases import DiseaseCatalog
from ayurcare.repositories.knowledge_base import KnowledgeBase
from ayurcare.repositories.symptoms import SymptomCatalog
from ayurcare.repositories.treatments import TreatmentCatalog
from ayurcare.services.consultation_service import ConsultationService


def get_symptom_catalog(request: Request) -> SymptomCatalog:
    return request.app.state.symptom_catalog


def get_disease_catalog(request: Request) -> DiseaseCatalog:
    return request.app.state.disease_catalog


def get_consultation_service(request: Request) -> ConsultationService:
    return request.app.state.consultation_service


def get_treatment_catalog(request: Request) -> TreatmentCatalog:
    return request.app.state.treatment_catalog


def get_knowledge_base(request: Request) -> KnowledgeBase:
    return request.app.state.knowledge_base
