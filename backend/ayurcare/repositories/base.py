"""
Base in-memory repositories.

`InMemoryRepository` covers reads, appends and partial patches; catalogs that
also support create/delete extend `CatalogRepository`.
"""

import itertools
import threading
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class InMemoryRepository(Generic[ModelType, UpdateSchemaType]):
    """
    Ordered collection of pydantic records keyed by a string `id`.

    Mutations are serialized with a lock; reads return snapshot lists so
    callers never iterate over a collection that is being modified.
    """

    def __init__(self, model: Type[ModelType], items: Optional[Iterable[ModelType]] = None):
        self.model = model
        self._lock = threading.Lock()
        self._items: List[ModelType] = list(items or [])
        start = max((int(item.id) for item in self._items if str(item.id).isdigit()), default=0) + 1
        self._ids = itertools.count(start)

    def next_id(self) -> str:
        """Reserve a fresh identifier; never reused, even after deletes."""
        with self._lock:
            return str(next(self._ids))

    def _index_of(self, id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == id:
                return index
        return -1

    def get(self, id: str) -> Optional[ModelType]:
        """Get a single record by ID."""
        for item in list(self._items):
            if item.id == id:
                return item
        return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[ModelType]:
        """Snapshot of all records, optionally filtered by field equality."""
        items = list(self._items)
        if filters:
            items = [
                item for item in items
                if all(getattr(item, field, None) == value for field, value in filters.items())
            ]
        return items

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return len(self.list(filters))

    def _insert(self, item: ModelType) -> None:
        self._items.append(item)

    def append(self, item: ModelType) -> ModelType:
        """Store an already-built record."""
        with self._lock:
            self._insert(item)
        return item

    def update(
        self,
        id: str,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> Optional[ModelType]:
        """
        Merge a partial patch into an existing record; None if the id is unknown.

        Fields sent as null are treated as "leave unchanged".
        """
        if isinstance(obj_in, dict):
            update_data = {field: value for field, value in obj_in.items() if value is not None}
        else:
            update_data = obj_in.model_dump(exclude_unset=True, exclude_none=True)

        with self._lock:
            index = self._index_of(id)
            if index == -1:
                return None
            merged = self._items[index].model_copy(update=update_data)
            # re-validate so a patch can't smuggle in invalid values
            merged = self.model.model_validate(merged.model_dump())
            self._items[index] = merged
            return merged


class CatalogRepository(InMemoryRepository[ModelType, UpdateSchemaType], Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Reference-data repository with create and delete."""

    def add(self, obj_in: CreateSchemaType) -> ModelType:
        """Create a new record from a create schema."""
        item = self.model(id=self.next_id(), **obj_in.model_dump())
        return self.append(item)

    def delete(self, id: str) -> bool:
        """Delete a record by ID."""
        with self._lock:
            index = self._index_of(id)
            if index == -1:
                return False
            del self._items[index]
            return True


def matches_query(query: str, *fields: Union[str, Iterable[str]]) -> bool:
    """Case-insensitive substring match against plain strings or lists of strings."""
    needle = query.strip().lower()
    for field in fields:
        values = [field] if isinstance(field, str) else field
        if any(needle in value.lower() for value in values):
            return True
    return False
