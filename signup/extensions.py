"""
Flask Extensions

Admin authentication is session-based: the session store holds the matched
admin record and nothing else grants access to the admin panel.
"""

from flask import current_app
from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()


def get_registrants():
    """Return the registrant repository wired into the current app."""
    return current_app.extensions['signup']['registrants']


def get_admins():
    """Return the admin credential repository wired into the current app."""
    return current_app.extensions['signup']['admins']


def get_channel():
    """Return the notification channel wired into the current app."""
    return current_app.extensions['signup']['channel']
