import pytest

from secretsapp import create_app
from secretsapp.auth.services import get_auth_services
from secretsapp.config import TestConfig
from secretsapp.extensions import db


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    # No app context is held open here: Flask-Login caches the user on `g`,
    # which would otherwise leak between requests.
    return app.test_client()


@pytest.fixture()
def services(app):
    with app.app_context():
        yield get_auth_services()


def register(client, username='a@x.com', password='pw1'):
    return client.post('/register', data={'username': username, 'password': password})


def login(client, username='a@x.com', password='pw1'):
    return client.post('/login', data={'username': username, 'password': password})
