"""
Registrant API Blueprint

JSON listing plus update and delete of registrants by email.
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__)

from signup.api import routes  # noqa: E402, F401
