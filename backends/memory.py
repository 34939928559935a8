"""In-memory category backend."""

import threading
from dataclasses import replace
from itertools import count
from typing import Dict, List, Optional
from backends.base import CategoryBackend
from exceptions import DuplicateNameError, NotFoundError
from models.category import Category


class InMemoryCategoryBackend(CategoryBackend):
    """Keeps categories in an insertion-ordered dict keyed by identifier.

    Identifiers start at 1 and are never handed out twice, even after a
    delete. Every read and write holds one lock, so reads never see the dict
    mid-change and the insert-time name check and the insert happen as one
    step.
    """

    def __init__(self):
        self._records: Dict[int, Category] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def find_all(self) -> List[Category]:
        with self._lock:
            return [replace(record) for record in self._records.values()]

    def find_by_id(self, category_id: int) -> Optional[Category]:
        with self._lock:
            record = self._records.get(category_id)
            return replace(record) if record else None

    def find_by_name(self, name: str) -> Optional[Category]:
        with self._lock:
            for record in self._records.values():
                if record.name == name:
                    return replace(record)
            return None

    def save(self, category: Category) -> Category:
        with self._lock:
            if category.id is None:
                if any(r.name == category.name for r in self._records.values()):
                    raise DuplicateNameError(category.name)
                record = replace(category, id=next(self._ids))
            else:
                if category.id not in self._records:
                    raise NotFoundError("Category", "id", category.id)
                record = replace(category)

            self._records[record.id] = record
            return replace(record)

    def delete(self, category: Category) -> None:
        with self._lock:
            self._records.pop(category.id, None)
