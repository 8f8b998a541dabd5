import threading
from concurrent.futures import ThreadPoolExecutor

from secretsapp import create_app
from secretsapp.auth.errors import DuplicateIdentifier
from secretsapp.auth.services import get_auth_services
from secretsapp.config import TestConfig
from secretsapp.extensions import db
from secretsapp.models import User


def test_concurrent_registration_has_one_winner(tmp_path):
    """Two registrations racing on one identifier: the unique constraint decides."""
    config = type('RaceConfig', (TestConfig,), {
        'SQLALCHEMY_DATABASE_URI': f'sqlite:///{tmp_path / "race.db"}',
    })
    app = create_app(config)
    barrier = threading.Barrier(2)

    def attempt(password):
        with app.app_context():
            store = get_auth_services().store
            barrier.wait()
            try:
                store.create('race@x.com', password)
                return 'created'
            except DuplicateIdentifier:
                return 'duplicate'
            finally:
                db.session.remove()

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = sorted(pool.map(attempt, ['pw-a', 'pw-b']))

    assert results == ['created', 'duplicate']
    with app.app_context():
        assert User.query.filter_by(identifier='race@x.com').count() == 1
