"""
Consultation store.

Holds consultations most-recent-first. Records are appended by
ConsultationService, never deleted, and only the reviewer-owned fields are
patched after creation.
"""

from typing import Iterable, List, Optional

from ayurcare.models import Consultation, ConsultationUpdate
from ayurcare.repositories.base import InMemoryRepository


class ConsultationStore(InMemoryRepository[Consultation, ConsultationUpdate]):

    def __init__(self, items: Optional[Iterable[Consultation]] = None):
        super().__init__(Consultation, items)

    def _insert(self, item: Consultation) -> None:
        self._items.insert(0, item)

    def list_for_user(self, user_id: Optional[str] = None) -> List[Consultation]:
        if user_id:
            return self.list({"user_id": user_id})
        return self.list()

    def recent(self, limit: int = 5) -> List[Consultation]:
        return self.list()[:max(limit, 0)]
