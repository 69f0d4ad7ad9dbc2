"""
Repository interfaces.

A repository hides one entity type's persistence behind query and mutation
operations, so controllers can run against a database session or against an
in-memory list alike.
"""
import abc
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy import inspect

T = TypeVar("T")

def primary_key_attrs(model) -> List[str]:
    """Attribute names of a mapped model's primary key, in column order."""
    return [column.key for column in inspect(model).primary_key]


class Repository(abc.ABC, Generic[T]):
    """Query/add/update/save operations for one entity type."""

    model: type

    @abc.abstractmethod
    def get_all(self) -> List[T]:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, id: Any) -> Optional[T]:
        """
            Get an entity by primary key.
            Composite keys are passed as a tuple in primary key column order.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def find(self, **criteria) -> List[T]:
        """Entities whose attributes equal every keyword criterion."""
        raise NotImplementedError

    def first(self, **criteria) -> Optional[T]:
        matches = self.find(**criteria)
        return matches[0] if matches else None

    @abc.abstractmethod
    def add(self, entity: T) -> T:
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, entity: T) -> T:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, entity: T) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def save_changes(self) -> None:
        """
            Persist staged changes.
            Raises sqlalchemy.exc.SQLAlchemyError when the data store rejects them.
        """
        raise NotImplementedError


class PersonRepository(Repository[T]):
    """Repository for people (instructors, students), listed by name."""

    @abc.abstractmethod
    def search(self, text: Optional[str]) -> List[T]:
        """People whose last or first name contains text, case-insensitive."""
        raise NotImplementedError
