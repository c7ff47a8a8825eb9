"""
Registration Blueprint

Public signup form and confirmation pages.
"""

from flask import Blueprint

registration_bp = Blueprint('registration', __name__)

from signup.registration import routes  # noqa: E402, F401
