"""
Admin Routes

Admin authentication is session-based: a successful login binds the matched
admin record into the server-side session.
"""

import logging

from flask import current_app, render_template, request, redirect, url_for, flash, session
from signup.admin import admin_bp
from signup.admin.decorators import admin_required
from signup.errors import AuthenticationError, ValidationError
from signup.extensions import get_admins, get_registrants
from signup.utils import get_payload

logger = logging.getLogger(__name__)


@admin_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login page."""
    if request.method == 'GET':
        if session.get('admin'):
            return redirect(url_for('admin.admin_view'))
        return render_template('login.html')

    data = get_payload()
    username = data.get('username', '').strip()
    password = data.get('password', '')

    try:
        if not username or not password:
            raise ValidationError('Please enter both username and password.')
        admin = get_admins().authenticate(username, password)
    except (ValidationError, AuthenticationError) as e:
        logger.info('Failed admin login for %r', username)
        flash(e.message, 'danger')
        return render_template('login.html'), e.status_code

    session.clear()
    session.regenerate()
    session['admin'] = admin.to_session()
    logger.info('Admin logged in: %s', admin.username)
    flash('Welcome, Administrator!', 'success')
    return redirect(url_for('admin.admin_view'))


@admin_bp.route('/logout')
def logout():
    """Admin logout - clears entire session."""
    admin = session.get('admin')
    if admin:
        logger.info('Admin logged out: %s', admin.get('username'))
    session.clear()
    flash('You have been logged out of the admin panel.', 'info')
    return redirect(url_for('admin.login'))


@admin_bp.route('/admin')
@admin_required
def admin_view():
    """Admin panel; registrants are loaded by the page from /users."""
    return render_template('admin.html',
                           admin_username=session['admin'].get('username', 'Admin'),
                           total_users=get_registrants().count(),
                           page_size=current_app.config['DEFAULT_PAGE_SIZE'],
                           socketio_path=current_app.config['SOCKETIO_PATH'])
