import pytest
from sqlalchemy import text

from skillbridge import create_app, db
from skillbridge.config import TestingConfig


@pytest.fixture
def app(tmp_path):
    app = create_app(TestingConfig)
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def count_rows(app):
    def count(table, where='1 = 1', **params):
        with app.app_context():
            return db.session.execute(
                text(f"SELECT COUNT(*) FROM {table} WHERE {where}"), params
            ).scalar()
    return count


@pytest.fixture
def register_entrepreneur(client):
    def register(**overrides):
        form = {
            'name': 'Alice',
            'surname': 'Martin',
            'email': 'alice@example.com',
            'password': 'secret-pass',
            'city': 'Lyon',
            'phone': '0600000000',
            'birthDate': '1990-04-12',
            'projectName': 'Bakery website',
            'sector': 'Food',
            'desiredSkills': 'Python, Design',
            'description': 'Online orders for a small bakery',
            'budget': '3000',
            'deadline': '2026-12-31',
        }
        form.update(overrides)
        return client.post('/registrations/entrepreneur', data=form,
                           content_type='multipart/form-data')
    return register


@pytest.fixture
def register_freelance(client):
    def register(**overrides):
        payload = {
            'name': 'Bob',
            'surname': 'Durand',
            'email': 'bob@example.com',
            'password': 'secret-pass',
            'city': 'Paris',
            'phone': '0611111111',
            'birthDate': '1994-09-01',
            'skills': 'Python, Django',
            'yearsExperience': 4,
            'hourlyRate': 45,
            'availability': 'Weekdays',
        }
        payload.update(overrides)
        return client.post('/registrations/freelance', json=payload)
    return register
