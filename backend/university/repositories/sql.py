import logging
from typing import Any, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from university.repositories.base import Repository, PersonRepository

logger = logging.getLogger(__name__)

class SqlAlchemyRepository(Repository):
    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def get_all(self):
        return self.db.query(self.model).all()

    def get(self, id: Any):
        return self.db.get(self.model, id)

    def find(self, **criteria):
        return self.db.query(self.model).filter_by(**criteria).all()

    def first(self, **criteria):
        return self.db.query(self.model).filter_by(**criteria).first()

    def add(self, entity):
        self.db.add(entity)
        return entity

    def update(self, entity):
        # Loaded entities are tracked by the session, detached ones are merged back
        if entity in self.db:
            return entity
        return self.db.merge(entity)

    def delete(self, entity):
        self.db.delete(entity)

    def save_changes(self):
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.warning(f"Rolled back {self.model.__name__} changes", exc_info=True)
            raise


class SqlAlchemyPersonRepository(SqlAlchemyRepository, PersonRepository):
    def _ordered(self, query):
        return query.order_by(self.model.last_name, self.model.first_mid_name)

    def get_all(self):
        return self._ordered(self.db.query(self.model)).all()

    def search(self, text: Optional[str]) -> List:
        query = self.db.query(self.model)
        if text:
            pattern = f"%{text}%"
            query = query.filter(or_(
                self.model.last_name.ilike(pattern),
                self.model.first_mid_name.ilike(pattern),
            ))
        return self._ordered(query).all()
