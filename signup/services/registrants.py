"""
Registrant Repository

Filter-based find, insert, update, delete and count over the registrants
table. Every operation either returns its result or raises; store failures
surface as PersistenceError after the session is rolled back.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError

from signup.errors import ConflictError, NotFoundError, PersistenceError
from signup.models import Registrant

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('fullname', 'phone')


def _like_pattern(text):
    """Build a LIKE pattern matching `text` as a literal substring."""
    escaped = text.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'


class RegistrantRepository:
    """Data access for registrants, bound to a Flask-SQLAlchemy handle."""

    def __init__(self, db):
        self.db = db

    @contextmanager
    def _store_errors(self, message):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('%s: %s', message, e)
            raise PersistenceError(message) from e

    def create(self, fullname, email, phone):
        """Insert a new registrant after checking the email is not taken.

        The existence check and the insert are separate statements, so two
        concurrent signups with the same email can both succeed.

        Raises:
            ConflictError: a registrant with this email already exists
            PersistenceError: the store failed
        """
        with self._store_errors('Error saving user'):
            if Registrant.query.filter_by(email=email).first() is not None:
                raise ConflictError()

            registrant = Registrant(fullname=fullname, email=email, phone=phone)
            self.db.session.add(registrant)
            self.db.session.commit()

        logger.info('New user inserted: %s', email)
        return registrant

    def search(self, search=None, sort='desc', page=1, limit=10):
        """Return one page of matching registrants and the total match count.

        Args:
            search: case-insensitive substring matched against fullname,
                email or phone; empty or None matches everyone
            sort: 'asc' for oldest first, anything else for newest first
            page: 1-based page number; pages past the end are empty
            limit: page size

        Returns:
            (list of Registrant, total number of matches)
        """
        with self._store_errors('Error fetching users.'):
            query = Registrant.query
            if search:
                pattern = _like_pattern(search)
                query = query.filter(or_(
                    Registrant.fullname.ilike(pattern, escape='\\'),
                    Registrant.email.ilike(pattern, escape='\\'),
                    Registrant.phone.ilike(pattern, escape='\\'),
                ))

            total = query.count()

            offset = (page - 1) * limit
            # Past the last page; also keeps the offset within SQL integer range.
            if offset >= total:
                return [], total

            if sort == 'asc':
                query = query.order_by(Registrant.created_at.asc(), Registrant.id.asc())
            else:
                query = query.order_by(Registrant.created_at.desc(), Registrant.id.desc())

            registrants = query.offset(offset).limit(limit).all()

        return registrants, total

    def update(self, email, **fields):
        """Apply a partial update to the registrant identified by `email`.

        Only fullname and phone can change; None values are ignored.

        Returns:
            dict of the fields whose value actually changed

        Raises:
            NotFoundError: no registrant has this email, or nothing changed
        """
        with self._store_errors('Error updating user'):
            registrant = Registrant.query.filter_by(email=email).first()
            if registrant is None:
                raise NotFoundError()

            changed = {}
            for name in UPDATABLE_FIELDS:
                value = fields.get(name)
                if value is not None and getattr(registrant, name) != value:
                    setattr(registrant, name, value)
                    changed[name] = value

            # A no-op update is indistinguishable from a missing record.
            if not changed:
                raise NotFoundError()

            self.db.session.commit()

        logger.info('User updated: %s (%s)', email, ', '.join(sorted(changed)))
        return changed

    def delete(self, email):
        """Delete the registrant identified by `email`.

        Raises:
            NotFoundError: no registrant has this email
        """
        with self._store_errors('Error deleting user'):
            registrant = Registrant.query.filter_by(email=email).first()
            if registrant is None:
                raise NotFoundError()

            self.db.session.delete(registrant)
            self.db.session.commit()

        logger.info('User deleted: %s', email)

    def count(self):
        with self._store_errors('Error fetching users.'):
            return Registrant.query.count()
