"""
Read-only Ayurvedic knowledge base: herbs and home remedies.

Searches are case-insensitive substring matches over the descriptive fields.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel

from ayurcare.models import Herb, KnowledgeBaseResults, Remedy
from ayurcare.repositories.base import InMemoryRepository, matches_query


class HerbCatalog(InMemoryRepository[Herb, BaseModel]):

    def __init__(self, items: Optional[Iterable[Herb]] = None):
        super().__init__(Herb, items)

    def search(self, query: str) -> List[Herb]:
        return [
            herb for herb in self.list()
            if matches_query(query, herb.name, herb.sanskrit_name, herb.benefits, herb.uses)
        ]


class RemedyCatalog(InMemoryRepository[Remedy, BaseModel]):

    def __init__(self, items: Optional[Iterable[Remedy]] = None):
        super().__init__(Remedy, items)

    def search(self, query: str) -> List[Remedy]:
        return [
            remedy for remedy in self.list()
            if matches_query(query, remedy.name, remedy.condition, remedy.ingredients)
        ]


class KnowledgeBase:
    """Herbs and remedies searched together."""

    def __init__(self, herbs: HerbCatalog, remedies: RemedyCatalog):
        self.herbs = herbs
        self.remedies = remedies

    def search_all(self, query: str) -> KnowledgeBaseResults:
        return KnowledgeBaseResults(herbs=self.herbs.search(query), remedies=self.remedies.search(query))
