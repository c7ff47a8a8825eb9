"""
Admin Decorator

Gate for the registrant admin panel. Access is decided solely by whether the
server-side session carries the admin record bound at login.
"""

from functools import wraps
from flask import session, redirect, url_for


def admin_required(f):
    """Render the wrapped view only for a session with a bound admin.

    Any logged-in admin sees every registrant; there are no roles. Visitors,
    registrants and expired sessions are sent to the login view, which
    brings them back to the admin panel after a successful login.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not session.get('admin'):
            return redirect(url_for('admin.login'))
        return f(*args, **kwargs)
    return wrapper
