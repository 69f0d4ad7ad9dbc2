"""In-memory repositories backed by plain Python lists."""
from typing import Any, Iterable, List, Optional

from university.repositories.base import Repository, PersonRepository, primary_key_attrs

class InMemoryRepository(Repository):
    def __init__(self, model, items: Optional[Iterable] = None):
        self.model = model
        self.items = list(items or [])
        self.key_attrs = primary_key_attrs(model)
        self.save_count = 0

    def _key_of(self, entity):
        return tuple(getattr(entity, attr) for attr in self.key_attrs)

    def _normalize_key(self, id: Any):
        return id if isinstance(id, tuple) else (id,)

    def _index_of(self, entity) -> Optional[int]:
        key = self._key_of(entity)
        for index, item in enumerate(self.items):
            if item is entity or self._key_of(item) == key:
                return index
        return None

    def get_all(self):
        return list(self.items)

    def get(self, id: Any):
        if id is None:
            return None
        key = self._normalize_key(id)
        for item in self.items:
            if self._key_of(item) == key:
                return item
        return None

    def find(self, **criteria):
        return [
            item for item in self.items
            if all(getattr(item, attr) == value for attr, value in criteria.items())
        ]

    def add(self, entity):
        # Mimic an autoincrement column for single integer keys
        if len(self.key_attrs) == 1 and getattr(entity, self.key_attrs[0]) is None:
            existing = [self._key_of(item)[0] for item in self.items]
            setattr(entity, self.key_attrs[0], max(existing, default=0) + 1)
        self.items.append(entity)
        return entity

    def update(self, entity):
        index = self._index_of(entity)
        if index is None:
            self.items.append(entity)
        else:
            self.items[index] = entity
        return entity

    def delete(self, entity):
        index = self._index_of(entity)
        if index is not None:
            del self.items[index]

    def save_changes(self):
        self.save_count += 1


class InMemoryPersonRepository(InMemoryRepository, PersonRepository):
    @staticmethod
    def _name_key(person):
        return (person.last_name or "", person.first_mid_name or "")

    def get_all(self):
        return sorted(self.items, key=self._name_key)

    def search(self, text: Optional[str]) -> List:
        if not text:
            return self.get_all()
        needle = text.lower()
        return [
            person for person in self.get_all()
            if needle in (person.last_name or "").lower()
            or needle in (person.first_mid_name or "").lower()
        ]
