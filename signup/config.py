"""
Configuration settings for the Football Signup service
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key (used for flash messages)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'football_signup.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side sessions (seconds of inactivity before a session expires)
    SESSION_COOKIE_NAME = 'signup_session'
    SESSION_LIFETIME = int(os.environ.get('SESSION_LIFETIME') or 3600)

    # Registrant listing
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100

    # Socket.IO push channel
    SOCKETIO_PATH = os.environ.get('SOCKETIO_PATH') or 'socket.io'
    SOCKETIO_CORS_ORIGINS = os.environ.get('SOCKETIO_CORS_ORIGINS') or '*'

    # Application settings
    EVENT_NAME = os.environ.get('EVENT_NAME') or 'Football Match'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
