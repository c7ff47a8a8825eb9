from signup.models import Registrant


def test_index_is_plain_text(client):
    r = client.get('/')
    assert r.status_code == 200
    assert r.mimetype == 'text/plain'
    assert r.get_data(as_text=True) == 'Football Signup Server is running!'


def test_signup_and_invitation_pages_render(client):
    r = client.get('/signup')
    assert r.status_code == 200
    assert 'name="fullname"' in r.get_data(as_text=True)

    r = client.get('/invitation')
    assert r.status_code == 200
    assert 'Thank you for signing up.' in r.get_data(as_text=True)


def test_signup_redirects_to_invitation(client, events):
    r = client.post('/signup', data={'fullname': 'Ada Lovelace', 'email': 'ada@example.com', 'phone': '5550101'})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/invitation')

    registrant = Registrant.query.filter_by(email='ada@example.com').one()
    assert registrant.fullname == 'Ada Lovelace'
    assert registrant.created_at is not None

    assert len(events) == 1
    event, payload = events[0]
    assert event == 'newUser'
    assert payload['fullname'] == 'Ada Lovelace'
    assert payload['email'] == 'ada@example.com'
    assert payload['phone'] == '5550101'
    assert payload['createdAt']


def test_signup_accepts_json_body(client):
    r = client.post('/signup', json={'fullname': 'Alan Turing', 'email': 'alan@example.com', 'phone': '5550102'})
    assert r.status_code == 302
    assert Registrant.query.count() == 1


def test_signup_missing_field(client, events):
    r = client.post('/signup', data={'fullname': 'Ada Lovelace', 'email': 'ada@example.com'})
    assert r.status_code == 400
    assert 'All fields are required.' in r.get_data(as_text=True)

    r = client.post('/signup', data={'fullname': '  ', 'email': 'ada@example.com', 'phone': '1'})
    assert r.status_code == 400

    assert Registrant.query.count() == 0
    assert events == []


def test_duplicate_email_rejected(client, events):
    data = {'fullname': 'Ada Lovelace', 'email': 'ada@example.com', 'phone': '5550101'}
    assert client.post('/signup', data=data).status_code == 302

    r = client.post('/signup', data=dict(data, fullname='Someone Else'))
    assert r.status_code == 400
    assert 'Email already registered' in r.get_data(as_text=True)

    assert Registrant.query.filter_by(email='ada@example.com').count() == 1
    assert len(events) == 1


def test_distinct_signups_each_listed_once(client):
    emails = [f'player{i}@example.com' for i in range(5)]
    for i, email in enumerate(emails):
        r = client.post('/signup', data={'fullname': f'Player {i}', 'email': email, 'phone': f'555{i}'})
        assert r.status_code == 302

    data = client.get('/users?limit=100').get_json()
    listed = [u['email'] for u in data['users']]
    assert data['total'] == 5
    for email in emails:
        assert listed.count(email) == 1


def test_signup_store_failure_is_500(app, client):
    from signup.extensions import db
    db.drop_all()

    r = client.post('/signup', data={'fullname': 'Ada', 'email': 'ada@example.com', 'phone': '1'})
    assert r.status_code == 500
    assert r.get_data(as_text=True) == 'Error saving user'
