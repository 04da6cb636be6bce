# backend/ayurcare/services/consultation_service.py

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional

from ayurcare.core.exceptions import InvalidStatusTransitionError, NotFoundError, ValidationError
from ayurcare.models import (
    Consultation,
    ConsultationInput,
    ConsultationStats,
    ConsultationStatus,
    ConsultationUpdate,
    TriageLevel,
)
from ayurcare.repositories.consultations import ConsultationStore
from ayurcare.services import triage
from ayurcare.services.recommendations import RecommendationComposer, StaticRecommendationComposer
from ayurcare.services.scoring import ScoringEngine

logger = logging.getLogger(__name__)

_STATUS_ORDER = {
    ConsultationStatus.PENDING: 0,
    ConsultationStatus.COMPLETED: 1,
    ConsultationStatus.REVIEWED: 2,
}


class ConsultationService:
    """
    Runs consultations through scoring, triage and recommendations and keeps
    the resulting records in the consultation store.
    """

    def __init__(
        self,
        store: ConsultationStore,
        scorer: Optional[ScoringEngine] = None,
        composer: Optional[RecommendationComposer] = None,
        latency_seconds: float = 0.0,
    ):
        self.store = store
        self.scorer = scorer or ScoringEngine()
        self.composer = composer or StaticRecommendationComposer()
        self.latency_seconds = latency_seconds

    def build(self, data: ConsultationInput) -> Consultation:
        """
        Assemble and store a consultation record.

        Callers must pass at least one symptom; `run_consultation` checks this.
        """
        consultation = Consultation(
            id=self.store.next_id(),
            user_id=data.user_id,
            date=datetime.now(timezone.utc),
            symptoms=list(data.symptoms),
            mental_condition=data.mental_condition,
            health_info=data.health_info,
            disease_history=data.disease_history,
            old_treatments=data.old_treatments,
            predicted_disease=self.scorer.score(data.symptoms),
            recommendations=self.composer.compose(data.symptoms),
            triage_level=triage.classify(data.symptoms, data.mental_condition.stress_level),
            status=ConsultationStatus.COMPLETED,
        )
        self.store.append(consultation)
        logger.info(
            f"Created consultation {consultation.id} for user {consultation.user_id} "
            f"(triage={consultation.triage_level.value}, symptoms={len(consultation.symptoms)})"
        )
        return consultation

    async def run_consultation(self, data: ConsultationInput) -> Consultation:
        if not data.symptoms:
            raise ValidationError("At least one symptom is required for consultation")

        # mock "AI" processing delay
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        return self.build(data)

    def list_consultations(self, user_id: Optional[str] = None) -> List[Consultation]:
        return self.store.list_for_user(user_id)

    def recent_consultations(self, limit: int = 5) -> List[Consultation]:
        return self.store.recent(limit)

    def get_consultation(self, consultation_id: str) -> Consultation:
        consultation = self.store.get(consultation_id)
        if consultation is None:
            logger.warning(f"Consultation {consultation_id} not found")
            raise NotFoundError("Consultation", consultation_id)
        return consultation

    def update_consultation(self, consultation_id: str, patch: ConsultationUpdate) -> Consultation:
        current = self.get_consultation(consultation_id)

        if patch.doctor_notes is not None and patch.status != ConsultationStatus.REVIEWED:
            raise ValidationError("Doctor notes can only be set together with status 'reviewed'")

        if patch.status is not None:
            if _STATUS_ORDER[patch.status] < _STATUS_ORDER[current.status]:
                raise InvalidStatusTransitionError(
                    f"Cannot move consultation from {current.status.value} to {patch.status.value}"
                )
            if patch.status == ConsultationStatus.REVIEWED and not (patch.doctor_notes or current.doctor_notes):
                raise ValidationError("Doctor notes are required to mark a consultation as reviewed")

        updated = self.store.update(consultation_id, patch)
        if updated is None:
            raise NotFoundError("Consultation", consultation_id)
        return updated

    def review_consultation(self, consultation_id: str, doctor_notes: str) -> Consultation:
        """Reviewer action: attach notes and mark the consultation as reviewed."""
        updated = self.update_consultation(
            consultation_id,
            ConsultationUpdate(status=ConsultationStatus.REVIEWED, doctor_notes=doctor_notes),
        )
        logger.info(f"Consultation {consultation_id} reviewed")
        return updated

    def stats(self) -> ConsultationStats:
        consultations = self.store.list()
        return ConsultationStats(
            total=len(consultations),
            pending=sum(1 for c in consultations if c.status == ConsultationStatus.PENDING),
            completed=sum(1 for c in consultations if c.status == ConsultationStatus.COMPLETED),
            reviewed=sum(1 for c in consultations if c.status == ConsultationStatus.REVIEWED),
            needs_review=sum(1 for c in consultations if c.triage_level != TriageLevel.NORMAL),
        )
