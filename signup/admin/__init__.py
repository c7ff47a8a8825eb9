"""
Admin Blueprint

Login, logout and the admin panel view.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from signup.admin import routes  # noqa: E402, F401
