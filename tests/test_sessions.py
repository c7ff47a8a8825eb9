from signup.sessions import MemorySessionStore


def test_memory_store_expiry(clock):
    store = MemorySessionStore(clock=clock)
    store.save('token', {'admin': {'id': 1}}, lifetime=10)

    clock.now += 9
    assert store.load('token') == {'admin': {'id': 1}}

    clock.now += 1
    assert store.load('token') is None
    assert len(store) == 0


def test_memory_store_returns_copies(clock):
    store = MemorySessionStore(clock=clock)
    store.save('token', {'count': 1}, lifetime=10)

    data = store.load('token')
    data['count'] = 2
    assert store.load('token') == {'count': 1}


def test_purge_expired(clock):
    store = MemorySessionStore(clock=clock)
    store.save('short', {'a': 1}, lifetime=5)
    store.save('long', {'b': 2}, lifetime=50)

    clock.now += 10
    assert store.purge_expired() == 1
    assert store.load('long') == {'b': 2}


def test_login_rotates_session_token(app, client, admin):
    client.get('/signup')
    client.post('/login', data={'username': 'admin', 'password': 'wrong'})
    before = client.get_cookie(app.config['SESSION_COOKIE_NAME'])

    client.post('/login', data={'username': 'admin', 'password': 'admin123'})
    after = client.get_cookie(app.config['SESSION_COOKIE_NAME'])

    assert after is not None
    if before is not None:
        assert before.value != after.value
        assert app.session_interface.store.load(before.value) is None
    assert app.session_interface.store.load(after.value)['admin']['username'] == 'admin'


def test_cookie_carries_only_token(app, admin_client):
    cookie = admin_client.get_cookie(app.config['SESSION_COOKIE_NAME'])
    assert 'admin' not in cookie.value


def test_injected_store_is_used(clock):
    from signup import create_app
    from signup.config import TestConfig

    store = MemorySessionStore(clock=clock)
    app = create_app(TestConfig, session_store=store)
    assert app.session_interface.store is store


def test_abandoned_sessions_are_purged(app, admin, clock):
    store = app.session_interface.store
    for _ in range(50):
        app.test_client().post('/login', data={'username': 'admin', 'password': 'admin123'})
    assert len(store) == 50

    clock.now += 10 * app.config['SESSION_LIFETIME']
    for _ in range(20):
        app.test_client().get('/')

    assert len(store) == 0


def test_purge_runs_at_most_once_per_interval(clock):
    store = MemorySessionStore(clock=clock, purge_interval=60)
    assert store.purge_expired() == 0

    store.save('token', {'a': 1}, lifetime=5)
    clock.now += 10
    assert store.purge_expired() == 0
    assert len(store) == 1

    clock.now += 60
    assert store.purge_expired() == 1
