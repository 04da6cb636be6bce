"""
Disease catalog repository (administrative reference data).
"""

import logging
from typing import Iterable, Optional

from ayurcare.models import Disease, DiseaseCreate, DiseaseUpdate
from ayurcare.repositories.base import CatalogRepository

logger = logging.getLogger(__name__)


class DiseaseCatalog(CatalogRepository[Disease, DiseaseCreate, DiseaseUpdate]):

    def __init__(self, items: Optional[Iterable[Disease]] = None):
        super().__init__(Disease, items)

    def add(self, obj_in: DiseaseCreate) -> Disease:
        disease = super().add(obj_in)
        logger.info(f"Added disease {disease.id} ({disease.name})")
        return disease

    def update(self, id: str, obj_in: DiseaseUpdate) -> Optional[Disease]:
        disease = super().update(id, obj_in)
        if disease:
            logger.info(f"Updated disease {id}")
        return disease

    def delete(self, id: str) -> bool:
        deleted = super().delete(id)
        if deleted:
            logger.info(f"Deleted disease {id}")
        return deleted
