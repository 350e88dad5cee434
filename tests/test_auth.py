from sqlalchemy import text

from skillbridge import db


def test_login_returns_minimal_identity(client, register_freelance):
    user_id = register_freelance().get_json()['id']

    response = client.post('/auth/login', json={'email': 'bob@example.com', 'password': 'secret-pass'})

    assert response.status_code == 200
    assert response.get_json() == {'id': user_id, 'name': 'Bob', 'role': 'freelance'}


def test_login_bad_credential(client, register_entrepreneur):
    register_entrepreneur()

    response = client.post('/auth/login', json={'email': 'alice@example.com', 'password': 'wrong'})

    assert response.status_code == 400
    assert response.get_json() == {'message': 'Invalid email or password'}


def test_login_unknown_email_looks_like_bad_credential(client, register_entrepreneur):
    register_entrepreneur()

    unknown = client.post('/auth/login', json={'email': 'nobody@example.com', 'password': 'secret-pass'})
    wrong = client.post('/auth/login', json={'email': 'alice@example.com', 'password': 'nope'})

    assert unknown.status_code == wrong.status_code == 400
    assert unknown.get_json() == wrong.get_json()


def test_login_requires_both_fields(client):
    assert client.post('/auth/login', json={'email': 'alice@example.com'}).status_code == 400
    assert client.post('/auth/login', data='not json').status_code == 400


def test_password_is_stored_hashed(app, register_entrepreneur):
    register_entrepreneur()
    with app.app_context():
        stored = db.session.execute(text("SELECT password_hash FROM users")).scalar()

    assert stored != 'secret-pass'
    assert stored.startswith('$2')


def test_login_body_must_be_an_object(client):
    response = client.post('/auth/login', json=['alice@example.com', 'secret-pass'])

    assert response.status_code == 400
    assert response.get_json() == {'message': 'Request body must be a JSON object'}
