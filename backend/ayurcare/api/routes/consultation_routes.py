# backend/ayurcare/api/routes/consultation_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ayurcare.api.deps import get_consultation_service
from ayurcare.core.config import settings
from ayurcare.models import (
    Consultation,
    ConsultationInput,
    ConsultationReview,
    ConsultationStats,
)
from ayurcare.services.consultation_service import ConsultationService

router = APIRouter(prefix="/consultations", tags=["consultations"])


@router.post("", response_model=Consultation, status_code=status.HTTP_201_CREATED)
async def create_consultation(
    payload: ConsultationInput,
    service: ConsultationService = Depends(get_consultation_service),
):
    """
    Submit symptoms and mental state; returns the scored consultation with
    predictions, triage level and recommendations.
    """
    return await service.run_consultation(payload)


@router.get("", response_model=List[Consultation])
async def list_consultations(
    user_id: Optional[str] = None,
    service: ConsultationService = Depends(get_consultation_service),
):
    return service.list_consultations(user_id)


@router.get("/recent", response_model=List[Consultation])
async def recent_consultations(
    limit: int = Query(settings.RECENT_CONSULTATIONS_LIMIT, ge=0),
    service: ConsultationService = Depends(get_consultation_service),
):
    return service.recent_consultations(limit)


@router.get("/stats", response_model=ConsultationStats)
async def consultation_stats(service: ConsultationService = Depends(get_consultation_service)):
    return service.stats()


@router.get("/{consultation_id}", response_model=Consultation)
async def get_consultation(
    consultation_id: str,
    service: ConsultationService = Depends(get_consultation_service),
):
    return service.get_consultation(consultation_id)


@router.post("/{consultation_id}/review", response_model=Consultation)
async def review_consultation(
    consultation_id: str,
    review: ConsultationReview,
    service: ConsultationService = Depends(get_consultation_service),
):
    """Reviewer action: adds doctor notes and marks the consultation reviewed."""
    return service.review_consultation(consultation_id, review.doctor_notes)
