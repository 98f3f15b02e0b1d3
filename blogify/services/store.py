"""
Document Store Service

Thin per-entity data access over Flask-SQLAlchemy. Every write is its own
commit; there are no transactions spanning more than one record.
"""

import logging
import re

from sqlalchemy.orm import joinedload
from blogify.extensions import db
from blogify.models import User, Blog, Comment

logger = logging.getLogger(__name__)

ID_PATTERN = re.compile(r'^[0-9a-f]{32}$')


class InvalidIdError(ValueError):
    """Raised when an id is not a well-formed document id."""

    def __init__(self, entity_id):
        super().__init__(f'Invalid id: {entity_id!r}')
        self.entity_id = entity_id


def validate_id(entity_id):
    if not isinstance(entity_id, str) or not ID_PATTERN.match(entity_id):
        raise InvalidIdError(entity_id)
    return entity_id


class DocumentStore:
    """find-many / find-by-id / create / update-by-id / delete-by-id for one model.

    ``populate`` takes relationship attribute names (e.g. ``'created_by'``)
    which are eager-loaded alongside the record.
    """

    def __init__(self, model):
        self.model = model

    def _options(self, populate):
        return [joinedload(getattr(self.model, name)) for name in populate]

    def find_many(self, populate=(), order_by=None, **filters):
        query = self.model.query.filter_by(**filters).options(*self._options(populate))
        if order_by is not None:
            query = query.order_by(order_by)
        return query.all()

    def find_by_id(self, entity_id, populate=()):
        """Return the record, or None when no record has this id."""
        validate_id(entity_id)
        return db.session.get(self.model, entity_id, options=self._options(populate))

    def create(self, **attributes):
        entity = self.model(**attributes)
        db.session.add(entity)
        self._commit('create')
        logger.info("Created %s %s", self.model.__name__, entity.id)
        return entity

    def update_by_id(self, entity_id, **attributes):
        """Apply a partial update and return the updated record, or None if absent."""
        entity = self.find_by_id(entity_id)
        if entity is None:
            return None
        for key, value in attributes.items():
            setattr(entity, key, value)
        self._commit('update')
        logger.info("Updated %s %s fields=%s", self.model.__name__, entity_id, sorted(attributes))
        return entity

    def delete_by_id(self, entity_id):
        """Delete the record if present. Returns whether anything was deleted."""
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        db.session.delete(entity)
        self._commit('delete')
        logger.info("Deleted %s %s", self.model.__name__, entity_id)
        return True

    def _commit(self, action):
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.exception("Could not %s %s", action, self.model.__name__)
            raise


users = DocumentStore(User)
blogs = DocumentStore(Blog)
comments = DocumentStore(Comment)
