"""
Symptom catalog repository.
"""

import logging
from typing import Iterable, List, Optional

from ayurcare.core.exceptions import ValidationError
from ayurcare.models import Symptom, SymptomCreate, SymptomUpdate
from ayurcare.repositories.base import CatalogRepository

logger = logging.getLogger(__name__)


class SymptomCatalog(CatalogRepository[Symptom, SymptomCreate, SymptomUpdate]):
    """Canonical symptom names, categories and severities. Names are unique, ignoring case."""

    def __init__(self, items: Optional[Iterable[Symptom]] = None):
        super().__init__(Symptom, items)

    def get_by_name(self, name: str) -> Optional[Symptom]:
        wanted = name.strip().lower()
        for symptom in self.list():
            if symptom.name.lower() == wanted:
                return symptom
        return None

    def _ensure_unique_name(self, name: str, symptom_id: Optional[str] = None) -> None:
        existing = self.get_by_name(name)
        if existing and existing.id != symptom_id:
            raise ValidationError(f"Symptom '{existing.name}' already exists")

    def by_category(self, category: str) -> List[Symptom]:
        return self.list({"category": category})

    def categories(self) -> List[str]:
        # dict keeps first-seen order
        return list(dict.fromkeys(symptom.category for symptom in self.list()))

    def add(self, obj_in: SymptomCreate) -> Symptom:
        self._ensure_unique_name(obj_in.name)
        symptom = super().add(obj_in)
        logger.info(f"Added symptom {symptom.id} ({symptom.name})")
        return symptom

    def update(self, id: str, obj_in: SymptomUpdate) -> Optional[Symptom]:
        if obj_in.name is not None:
            self._ensure_unique_name(obj_in.name, id)
        symptom = super().update(id, obj_in)
        if symptom:
            logger.info(f"Updated symptom {id}")
        return symptom

    def delete(self, id: str) -> bool:
        deleted = super().delete(id)
        if deleted:
            logger.info(f"Deleted symptom {id}")
        return deleted
