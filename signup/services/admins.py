"""
Admin Credential Repository

Admins are provisioned out-of-band (see scripts/make_admin.py); the web
service only matches credentials on login.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash

from signup.errors import AuthenticationError, PersistenceError
from signup.models import AdminCredential

logger = logging.getLogger(__name__)


class AdminRepository:
    """Lookup and provisioning of admin credentials."""

    def __init__(self, db):
        self.db = db

    def authenticate(self, username, password):
        """Return the admin whose username and password both match.

        Raises:
            AuthenticationError: no credential matches
            PersistenceError: the store failed
        """
        try:
            candidates = AdminCredential.query.filter_by(username=username).all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Error fetching admin credentials: %s', e)
            raise PersistenceError('Error logging in') from e

        for admin in candidates:
            if admin.check_password(password):
                return admin

        raise AuthenticationError()

    def provision(self, username, password):
        """Create an admin, or reset the password of an existing one."""
        try:
            admin = AdminCredential.query.filter_by(username=username).first()
            if admin is None:
                admin = AdminCredential(username=username)
                self.db.session.add(admin)
                logger.info('New admin created: %s', username)
            else:
                logger.info('Existing admin password reset: %s', username)

            admin.password_hash = generate_password_hash(password, method='pbkdf2:sha256')
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Could not provision admin %s: %s', username, e)
            raise PersistenceError('Could not provision admin') from e

        return admin
