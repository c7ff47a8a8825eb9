import pytest

from signup import create_app
from signup.config import TestConfig
from signup.extensions import db, get_admins, get_channel, get_registrants
from signup.sessions import MemorySessionStore


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def app(clock):
    app = create_app(TestConfig, session_store=MemorySessionStore(clock=clock))
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def events(app):
    """Every (event, payload) published on the notification channel."""
    received = []
    get_channel().subscribe(lambda event, payload: received.append((event, payload)))
    return received


@pytest.fixture()
def admin(app):
    return get_admins().provision('admin', 'admin123')


@pytest.fixture()
def admin_client(client, admin):
    r = client.post('/login', data={'username': 'admin', 'password': 'admin123'})
    assert r.status_code == 302
    return client


@pytest.fixture()
def add_registrant(app):
    def _add(fullname, email, phone='5550100'):
        return get_registrants().create(fullname, email, phone)
    return _add
