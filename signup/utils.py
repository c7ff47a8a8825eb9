"""
Request helpers shared by the blueprints.
"""

from flask import request


def get_payload():
    """Request body as a dict of strings, from JSON or form data."""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
    else:
        data = request.form
    return {key: str(value) for key, value in data.items() if value is not None}


def positive_int(value, default, maximum=None):
    """Parse a positive integer query value, falling back to `default`."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    if maximum is not None:
        number = min(number, maximum)
    return number
