"""
Football Signup - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError

from signup.config import Config
from signup.errors import register_error_handlers
from signup.extensions import db

logger = logging.getLogger(__name__)


def create_app(config_class=Config, session_store=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        session_store: SessionStore to keep sessions in (default: a new
            MemorySessionStore)

    Returns:
        Configured Flask application instance
    """
    from signup.services import AdminRepository, NotificationChannel, RealtimeBridge, RegistrantRepository
    from signup.sessions import MemorySessionStore, ServerSideSessionInterface

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    app.session_interface = ServerSideSessionInterface(
        session_store if session_store is not None else MemorySessionStore()
    )

    # Wire repositories and the push channel
    channel = NotificationChannel()
    app.extensions['signup'] = {
        'registrants': RegistrantRepository(db),
        'admins': AdminRepository(db),
        'channel': channel,
    }
    app.extensions['signup']['realtime'] = RealtimeBridge(app, channel, app.session_interface)

    register_error_handlers(app)

    # Register blueprints
    from signup.registration import registration_bp
    from signup.admin import admin_bp
    from signup.api import api_bp

    app.register_blueprint(registration_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(api_bp)

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        try:
            db.create_all()
        except SQLAlchemyError as e:
            # Routes touching the store will fail with 500 until the database is reachable.
            logger.error('Could not initialise database: %s', e)

    return app
