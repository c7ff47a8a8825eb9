"""
Error Types

Request-scoped errors raised by the route layer and the repositories. Each
carries the HTTP status code and the message sent back to the client.
"""

import logging

logger = logging.getLogger(__name__)


class SignupError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(SignupError):
    """A required field is missing."""
    status_code = 400
    message = 'All fields are required.'


class ConflictError(SignupError):
    """A registrant with the same email already exists."""
    status_code = 400
    message = 'Email already registered'


class AuthenticationError(SignupError):
    """No admin credential matches the submitted username and password."""
    status_code = 401
    message = 'Invalid administrator credentials.'


class NotFoundError(SignupError):
    """Update or delete target is absent.

    Reported to the client as a 200 with a "not found" message.
    """
    status_code = 200
    message = 'No user found'


class PersistenceError(SignupError):
    """The underlying store failed; the original error is logged, not surfaced."""
    status_code = 500
    message = 'Database error'


def register_error_handlers(app):
    """Turn SignupError subclasses into plain-text responses."""

    @app.errorhandler(SignupError)
    def handle_signup_error(error):
        if isinstance(error, PersistenceError):
            logger.error('Request failed with persistence error: %s', error.message)
        return error.message, error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}
