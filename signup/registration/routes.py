"""
Registration Routes

Visitors sign up for the event here. Every successful signup is pushed to
connected admin viewers.
"""

from flask import current_app, render_template, request, redirect, url_for, flash
from signup.errors import ConflictError, ValidationError
from signup.extensions import get_channel, get_registrants
from signup.registration import registration_bp
from signup.services import NEW_USER
from signup.utils import get_payload


@registration_bp.route('/')
def index():
    """Liveness text"""
    return 'Football Signup Server is running!', 200, {'Content-Type': 'text/plain; charset=utf-8'}


@registration_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """Signup form; a successful POST redirects to the invitation page."""
    if request.method == 'GET':
        return render_template('signup.html', event_name=current_app.config['EVENT_NAME'])

    data = get_payload()
    fullname = data.get('fullname', '').strip()
    email = data.get('email', '').strip()
    phone = data.get('phone', '').strip()

    try:
        if not fullname or not email or not phone:
            raise ValidationError()
        registrant = get_registrants().create(fullname, email, phone)
    except (ValidationError, ConflictError) as e:
        flash(e.message, 'danger')
        return render_template('signup.html', event_name=current_app.config['EVENT_NAME']), e.status_code

    get_channel().publish(NEW_USER, registrant.to_dict())
    return redirect(url_for('registration.invitation'))


@registration_bp.route('/invitation')
def invitation():
    """Signup confirmation page"""
    return render_template('invitation.html', event_name=current_app.config['EVENT_NAME'])
