"""
Registrant API Routes

Mutations publish an event to the notification channel once the store has
accepted them. A missing target is answered with 200 "No user found" by the
NotFoundError handler.
"""

from flask import current_app, request, jsonify
from signup.api import api_bp
from signup.errors import ValidationError
from signup.extensions import get_channel, get_registrants
from signup.services import UPDATE_USER, DELETE_USER
from signup.utils import get_payload, positive_int

TEXT = {'Content-Type': 'text/plain; charset=utf-8'}


@api_bp.route('/users', methods=['GET'])
def list_users():
    """
    Search and paginate registrants.

    Query Parameters:
        search: substring matched against fullname, email or phone
        sort: 'asc' for oldest first, newest first otherwise
        page: 1-based page number (default 1)
        limit: page size (default DEFAULT_PAGE_SIZE)
    """
    search = request.args.get('search', '')
    sort = request.args.get('sort', 'desc')
    page = positive_int(request.args.get('page'), 1)
    limit = positive_int(request.args.get('limit'),
                         current_app.config['DEFAULT_PAGE_SIZE'],
                         maximum=current_app.config['MAX_PAGE_SIZE'])

    registrants, total = get_registrants().search(search=search, sort=sort, page=page, limit=limit)
    return jsonify({'users': [r.to_dict() for r in registrants], 'total': total})


@api_bp.route('/users', methods=['PUT'])
def update_user():
    """Partially update fullname and/or phone of the registrant with `email`."""
    data = get_payload()
    email = data.get('email', '').strip()
    if not email:
        raise ValidationError('Email is required')

    changed = get_registrants().update(
        email,
        fullname=data.get('fullname', '').strip() or None,
        phone=data.get('phone', '').strip() or None,
    )

    get_channel().publish(UPDATE_USER, dict(changed, email=email))
    return 'User updated', 200, TEXT


@api_bp.route('/users', methods=['DELETE'])
def delete_user():
    """Delete the registrant with `email`."""
    data = get_payload()
    email = data.get('email', '').strip()
    if not email:
        raise ValidationError('Email is required')

    get_registrants().delete(email)

    get_channel().publish(DELETE_USER, email)
    return 'User deleted', 200, TEXT
