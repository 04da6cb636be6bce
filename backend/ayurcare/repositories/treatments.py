"""
Treatment protocol catalog (administrative reference data).
"""

import logging
from typing import Iterable, List, Optional

from ayurcare.models import Treatment, TreatmentCreate, TreatmentUpdate
from ayurcare.repositories.base import CatalogRepository

logger = logging.getLogger(__name__)


class TreatmentCatalog(CatalogRepository[Treatment, TreatmentCreate, TreatmentUpdate]):

    def __init__(self, items: Optional[Iterable[Treatment]] = None):
        super().__init__(Treatment, items)

    def for_disease(self, disease_id: str) -> List[Treatment]:
        return self.list({"disease_id": disease_id})

    def add(self, obj_in: TreatmentCreate) -> Treatment:
        treatment = super().add(obj_in)
        logger.info(f"Added treatment {treatment.id} ({treatment.name}) for disease {treatment.disease_id}")
        return treatment

    def update(self, id: str, obj_in: TreatmentUpdate) -> Optional[Treatment]:
        treatment = super().update(id, obj_in)
        if treatment:
            logger.info(f"Updated treatment {id}")
        return treatment
